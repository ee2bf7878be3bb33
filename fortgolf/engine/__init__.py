"""
Fort Golf scoring engine
Core rules without web framework, database, or UI
"""

# Zero-pressure hole: attackers did nothing and the defender made bogey or worse
NO_PRESSURE_REPAIR = 1
