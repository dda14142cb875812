"""Unit tests for User domain model, UserDTO, Outcome and error kinds."""

import unittest
from dataclasses import FrozenInstanceError, replace
from datetime import datetime, timezone

from domain.model.errors import DomainError, DuplicateError, ErrorKind, NotFoundError, ValidationError
from domain.model.result import Outcome
from domain.model.user import User, UserDTO


class TestUser(unittest.TestCase):
    """Tests for entity defaults and domain predicates."""

    def test_defaults_role_and_created_at(self):
        user = User(id=None, name='John', email='john@x.com')

        self.assertEqual(user.role, 'user')
        self.assertIsNotNone(user.created_at)
        self.assertEqual(user.created_at.tzinfo, timezone.utc)

    def test_explicit_none_created_at_falls_back_to_now(self):
        user = User(id='1', name='John', email='john@x.com', created_at=None)
        self.assertIsInstance(user.created_at, datetime)

    def test_keeps_supplied_created_at(self):
        ts = datetime(2026, 1, 1, tzinfo=timezone.utc)
        user = User(id='1', name='John', email='john@x.com', created_at=ts)
        self.assertEqual(user.created_at, ts)

    def test_is_persisted_depends_on_id(self):
        self.assertFalse(User(id=None, name='a', email='b').is_persisted)
        self.assertTrue(User(id='abc', name='a', email='b').is_persisted)

    def test_is_admin(self):
        self.assertTrue(User(id=None, name='a', email='b', role='admin').is_admin())
        self.assertFalse(User(id=None, name='a', email='b').is_admin())
        self.assertFalse(User(id=None, name='a', email='b', role='Admin').is_admin())

    def test_is_immutable(self):
        user = User(id=None, name='a', email='b')
        with self.assertRaises(FrozenInstanceError):
            user.name = 'changed'

    def test_replace_produces_new_instance(self):
        user = User(id=None, name='a', email='b')
        saved = replace(user, id='1')

        self.assertIsNone(user.id)
        self.assertEqual(saved.id, '1')
        self.assertEqual(saved.created_at, user.created_at)


class TestUserDTO(unittest.TestCase):

    def test_to_dict_has_no_created_at(self):
        dto = UserDTO(id='1', name='John', email='john@x.com', role='user')
        self.assertEqual(dto.to_dict(), {'id': '1', 'name': 'John', 'email': 'john@x.com', 'role': 'user'})

    def test_dtos_with_same_fields_are_equal(self):
        self.assertEqual(UserDTO('1', 'a', 'b', 'user'), UserDTO('1', 'a', 'b', 'user'))


class TestOutcome(unittest.TestCase):

    def test_success(self):
        outcome = Outcome.success([1, 2])
        self.assertTrue(outcome.is_ok)
        self.assertEqual(outcome.value, [1, 2])
        self.assertIsNone(outcome.error_kind)

    def test_failure(self):
        outcome = Outcome.failure(ErrorKind.NOT_FOUND, "User not found")
        self.assertFalse(outcome.is_ok)
        self.assertIsNone(outcome.value)
        self.assertEqual(outcome.message, "User not found")

    def test_from_error_uses_error_kind(self):
        cases = [
            (ValidationError("bad"), ErrorKind.VALIDATION),
            (NotFoundError("missing"), ErrorKind.NOT_FOUND),
            (DuplicateError("dup"), ErrorKind.CONFLICT),
            (DomainError("other"), ErrorKind.UNEXPECTED),
        ]
        for error, kind in cases:
            with self.subTest(error=type(error).__name__):
                outcome = Outcome.from_error(error)
                self.assertEqual(outcome.error_kind, kind)
                self.assertEqual(outcome.message, str(error))


if __name__ == '__main__':
    unittest.main()
