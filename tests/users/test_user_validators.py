from __future__ import annotations

from src.salon_system.salon_system.users.model import UpdateUserCommand, UserCommand
from src.salon_system.salon_system.users.validators import (
    LOGIN_EMPTY,
    LOGIN_TAKEN,
    PASSWORD_TOO_SHORT,
    UpdateUserCommandValidator,
    UserCommandValidator,
)


def test_valid_create_command_passes(users_repo):
    result = UserCommandValidator(users_repo).validate(
        UserCommand(login="newbie", password="secret1", name="New", email="new@salon.local")
    )

    assert result.is_valid
    assert result.errors == []


def test_empty_login_fails(users_repo):
    result = UserCommandValidator(users_repo).validate(UserCommand(login="", password="secret1"))

    assert not result.is_valid
    assert result.messages() == [LOGIN_EMPTY]


def test_whitespace_login_counts_as_empty(users_repo):
    result = UserCommandValidator(users_repo).validate(UserCommand(login="   ", password="secret1"))

    assert result.messages() == [LOGIN_EMPTY]


def test_password_of_five_characters_is_too_short(users_repo):
    result = UserCommandValidator(users_repo).validate(UserCommand(login="newbie", password="12345"))

    assert result.messages() == [PASSWORD_TOO_SHORT]


def test_password_of_six_characters_is_enough(users_repo):
    result = UserCommandValidator(users_repo).validate(UserCommand(login="newbie", password="123456"))

    assert result.is_valid


def test_missing_password_fails(users_repo):
    result = UserCommandValidator(users_repo).validate(UserCommand(login="newbie", password=None))

    assert result.messages() == [PASSWORD_TOO_SHORT]


def test_existing_login_fails_for_new_user(users_repo):
    result = UserCommandValidator(users_repo).validate(UserCommand(login="robert", password="secret1"))

    assert result.messages() == [LOGIN_TAKEN]


def test_existing_login_passes_for_the_same_user(users_repo):
    result = UserCommandValidator(users_repo).validate(UserCommand(id="1", login="robert", password="secret1"))

    assert result.is_valid


def test_all_failures_are_collected(users_repo):
    result = UserCommandValidator(users_repo).validate(UserCommand(login="", password="123"))

    assert result.messages() == [LOGIN_EMPTY, PASSWORD_TOO_SHORT]
    assert [e.property_name for e in result.errors] == ["login", "password"]


def test_update_without_login_passes(users_repo):
    result = UpdateUserCommandValidator(users_repo).validate(UpdateUserCommand(id="1", name="Bob"))

    assert result.is_valid


def test_update_with_empty_login_fails(users_repo):
    result = UpdateUserCommandValidator(users_repo).validate(UpdateUserCommand(id="1", login=""))

    assert result.messages() == [LOGIN_EMPTY]


def test_update_keeping_own_login_passes(users_repo):
    result = UpdateUserCommandValidator(users_repo).validate(UpdateUserCommand(id="1", login="robert"))

    assert result.is_valid


def test_update_taking_someone_elses_login_fails(users_repo):
    result = UpdateUserCommandValidator(users_repo).validate(UpdateUserCommand(id="1", login="tony"))

    assert result.messages() == [LOGIN_TAKEN]


def test_validating_the_same_command_twice_gives_the_same_result(users_repo):
    validator = UserCommandValidator(users_repo)
    command = UserCommand(login="robert", password="123")

    assert validator.validate(command) == validator.validate(command)
