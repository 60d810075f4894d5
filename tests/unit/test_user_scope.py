"""
Unit tests for the three-state history scope
"""
import pytest

from app.schemas.translation import GetTranslationHistoryInput
from app.schemas.user_scope import ScopeKind, UserScope


def test_omitted_user_id_is_unspecified():
    query = GetTranslationHistoryInput()
    assert query.scope == UserScope.unspecified()
    assert query.scope.favorites_user_id is None


def test_explicit_null_user_id_is_anonymous():
    query = GetTranslationHistoryInput(user_id=None)
    assert query.scope.kind == ScopeKind.ANONYMOUS
    assert query.scope.favorites_user_id is None


def test_string_user_id_is_owner():
    query = GetTranslationHistoryInput(user_id="user123")
    assert query.scope == UserScope.owner("user123")
    assert query.scope.favorites_user_id == "user123"


def test_scope_from_json_payload():
    assert GetTranslationHistoryInput.model_validate({}).scope.kind == ScopeKind.UNSPECIFIED
    assert GetTranslationHistoryInput.model_validate({"user_id": None}).scope.kind == ScopeKind.ANONYMOUS
    assert GetTranslationHistoryInput.model_validate({"user_id": "u1"}).scope.kind == ScopeKind.OWNER


def test_owner_scope_requires_user_id():
    with pytest.raises(ValueError):
        UserScope(ScopeKind.OWNER)


def test_anonymous_scope_rejects_user_id():
    with pytest.raises(ValueError):
        UserScope(ScopeKind.ANONYMOUS, "u1")
