from user_registry.domain.user import (
    DuplicateUserError,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserRegistryError,
)


def test_errors_share_a_base_and_carry_the_email():
    for error_cls in (DuplicateUserError, UserAlreadyExistsError, UserNotFoundError):
        exc = error_cls("x@mail.com")
        assert isinstance(exc, UserRegistryError)
        assert exc.email == "x@mail.com"


def test_duplicate_tiers_are_distinct_types():
    assert not issubclass(DuplicateUserError, UserAlreadyExistsError)
    assert not issubclass(UserAlreadyExistsError, DuplicateUserError)
    assert str(DuplicateUserError("x@mail.com")) == "User already exists"
    assert str(UserAlreadyExistsError("x@mail.com")) == "User already exists"
