"""Unit tests for API dependencies and repository wiring at startup.

Tests focus on:
- get_user_repo() reading the repository from app.state, 503 when absent
- Controllers built over use cases sharing one repository
- Lifespan selecting the MongoDB adapter and failing startup when it is unreachable
- Service version read from package metadata, then pyproject.toml
"""

import unittest
from importlib.metadata import PackageNotFoundError
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from fastapi import HTTPException
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from adapter.memory.user_repository import InMemoryUserRepository
from adapter.mongodb.user_repository import MongoUserRepository
from api.config import Settings
from api.controllers import CreateUserController, GetUsersController
from api.dependencies import get_create_user_controller, get_user_repo, get_users_controller
from api.main import StartupError, _read_version, create_app


def _request_with_state(**state):
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(**state)))


class TestGetUserRepo(unittest.TestCase):

    def test_returns_wired_repository(self):
        repo = InMemoryUserRepository()
        self.assertIs(get_user_repo(_request_with_state(user_repository=repo)), repo)

    def test_raises_503_when_not_wired(self):
        for request in (_request_with_state(), _request_with_state(user_repository=None)):
            with self.assertRaises(HTTPException) as context:
                get_user_repo(request)
            self.assertEqual(context.exception.status_code, 503)
            self.assertEqual(context.exception.detail, "Database unavailable")


class TestControllerFactories(unittest.TestCase):

    def test_controllers_share_repository(self):
        repo = InMemoryUserRepository()

        create_controller = get_create_user_controller(repo)
        users_controller = get_users_controller(repo)

        self.assertIsInstance(create_controller, CreateUserController)
        self.assertIsInstance(users_controller, GetUsersController)
        self.assertIs(create_controller.create_user.repo, repo)
        self.assertIs(users_controller.get_all_users.repo, repo)
        self.assertIs(users_controller.get_user_by_id.repo, repo)


class TestMongoWiring(unittest.TestCase):

    def setUp(self):
        self.settings = Settings(
            mongo_url='mongodb://db:27017',
            database_name='users-test',
            repository_backend='mongodb',
        )

    @patch('api.main.ensure_all_indexes', return_value=True)
    @patch('api.main.connect')
    def test_lifespan_wires_mongo_repository_and_closes_client(self, mock_connect, mock_indexes):
        mock_client = MagicMock()
        mock_connect.return_value = mock_client
        app = create_app(self.settings)

        with TestClient(app):
            self.assertIsInstance(app.state.user_repository, MongoUserRepository)
            self.assertIs(app.state.mongo_client, mock_client)

        mock_connect.assert_called_once_with('mongodb://db:27017')
        mock_client.__getitem__.assert_called_with('users-test')
        mock_indexes.assert_called_once()
        mock_client.close.assert_called_once()

    @patch('api.main.connect')
    def test_unreachable_mongo_aborts_startup(self, mock_connect):
        mock_connect.side_effect = ServerSelectionTimeoutError("No servers available")
        app = create_app(self.settings)

        with self.assertRaises(StartupError):
            with TestClient(app):
                pass

    @patch('api.main.connect')
    def test_injected_repository_skips_backend_selection(self, mock_connect):
        repo = InMemoryUserRepository()
        app = create_app(self.settings, repository=repo)

        with TestClient(app):
            self.assertIs(app.state.user_repository, repo)
        mock_connect.assert_not_called()


class TestReadVersion(unittest.TestCase):

    @patch('api.main.version', return_value='9.9.9')
    def test_prefers_installed_metadata(self, mock_version):
        self.assertEqual(_read_version(), '9.9.9')
        mock_version.assert_called_once_with('user-service')

    @patch('api.main.version', side_effect=PackageNotFoundError('user-service'))
    def test_falls_back_to_pyproject(self, mock_version):
        self.assertEqual(_read_version(), '1.0.0')


if __name__ == '__main__':
    unittest.main()
