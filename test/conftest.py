"""
Shared test setup.
Binds the results archive to a throwaway SQLite file for the whole session.
"""

import pytest

from fortgolf.api.database import configure_archive, init_db
from fortgolf.engine.definitions import GameMode
from helpers import make_state


@pytest.fixture(scope="session", autouse=True)
def archive_db(tmp_path_factory):
    url = f"sqlite:///{tmp_path_factory.mktemp('archive') / 'test.db'}"
    engine = configure_archive(url)
    init_db()
    yield engine
    engine.dispose()


@pytest.fixture
def siege_state():
    return make_state(GameMode.SIEGE)


@pytest.fixture
def elimination_state():
    return make_state(GameMode.ELIMINATION)
