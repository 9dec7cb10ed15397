from tests.fixtures.app_fixtures import *  # noqa: F401,F403
