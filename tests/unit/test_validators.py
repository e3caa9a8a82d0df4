"""Tests for field validators."""
import re
import pytest

from authlock.core.validators import (
    InputValidator,
    EmailValidator,
    UsernameValidator,
    NonEmptyValidator,
    trimmed
)
from authlock.core.exceptions import (
    EmailValidationError,
    UsernameValidationError,
    EmptyInputError
)


class TestTrimmed:
    """Tests for trimmed helper."""
    
    def test_strips_whitespace_and_newlines(self):
        assert trimmed("  alice \n\t") == "alice"
    
    def test_keeps_none(self):
        assert trimmed(None) is None


class TestEmailValidator:
    """Test suite for EmailValidator."""
    
    @pytest.fixture
    def validator(self):
        return EmailValidator()
    
    def test_is_input_validator(self, validator):
        assert isinstance(validator, InputValidator)
    
    @pytest.mark.parametrize("value", [
        "a@b.com",
        "first.last+tag@sub.example.org",
        "  user@example.io \n",
        "USER@EXAMPLE.COM",
    ])
    def test_valid_emails(self, validator, value):
        assert validator.validate(value) is None
    
    @pytest.mark.parametrize("value", [
        None,
        "",
        "   ",
        "alice",
        "alice@",
        "@example.com",
        "alice@example",
        "alice@@example.com",
        "al ice@example.com",
    ])
    def test_invalid_emails(self, validator, value):
        assert isinstance(validator.validate(value), EmailValidationError)
    
    def test_custom_pattern(self):
        validator = EmailValidator(re.compile(r'^.+@corp\.com$'))
        
        assert validator.validate("a@corp.com") is None
        assert isinstance(validator.validate("a@b.com"), EmailValidationError)


class TestUsernameValidator:
    """Test suite for UsernameValidator."""
    
    @pytest.fixture
    def validator(self):
        return UsernameValidator()
    
    @pytest.mark.parametrize("value", ["alice", "a", "user_01", " alice ", "a" * 15])
    def test_valid_usernames(self, validator, value):
        assert validator.validate(value) is None
    
    @pytest.mark.parametrize("value", [None, "", "  ", "a" * 16, "a@b.com", "al ice", "alice!"])
    def test_invalid_usernames(self, validator, value):
        assert isinstance(validator.validate(value), UsernameValidationError)
    
    def test_empty_is_username_error(self, validator):
        """Empty usernames are not reported as EmptyInputError."""
        error = validator.validate("")
        
        assert isinstance(error, UsernameValidationError)
        assert not isinstance(error, EmptyInputError)
    
    def test_permissive_accepts_any_non_empty(self):
        validator = UsernameValidator.permissive()
        
        assert validator.validate("a@b.com") is None
        assert validator.validate("x" * 100) is None
        assert isinstance(validator.validate(" "), UsernameValidationError)
    
    def test_custom_length(self):
        validator = UsernameValidator(min_length=3, max_length=5)
        
        assert isinstance(validator.validate("ab"), UsernameValidationError)
        assert validator.validate("abc") is None
        assert isinstance(validator.validate("abcdef"), UsernameValidationError)
    
    def test_invalid_limits(self):
        with pytest.raises(ValueError):
            UsernameValidator(min_length=0)
        with pytest.raises(ValueError):
            UsernameValidator(min_length=5, max_length=2)


class TestNonEmptyValidator:
    """Test suite for NonEmptyValidator."""
    
    @pytest.fixture
    def validator(self):
        return NonEmptyValidator()
    
    def test_none_is_empty(self, validator):
        assert isinstance(validator.validate(None), EmptyInputError)
    
    def test_empty_string_is_empty(self, validator):
        assert isinstance(validator.validate(""), EmptyInputError)
    
    def test_whitespace_is_content(self, validator):
        assert validator.validate("   ") is None
    
    def test_no_complexity_rules(self, validator):
        assert validator.validate("a") is None
