# tests/test_identity.py
"""
Unit tests for the Identity model.
"""
from __future__ import annotations

import pytest

from house_hunter.auth.identity import Identity


def test_unauthenticated_identity():
    identity = Identity.unauthenticated()

    assert identity.user_id is None
    assert identity.email is None
    assert identity.is_authenticated is False
    assert identity.claims == {}


def test_identity_from_user_claims():
    claims = {"sub": "abc", "userId": "abc", "email": "Tenant@Example.COM", "exp": 1, "iat": 0}
    identity = Identity.from_claims(claims)

    assert identity.user_id == "abc"
    assert identity.email == "tenant@example.com"  # Normalized
    assert identity.is_authenticated is True
    assert identity.claims == claims


def test_identity_from_issued_claims_without_user_id():
    identity = Identity.from_claims({"email": "x@y.com"})

    assert identity.user_id is None
    assert identity.email == "x@y.com"
    assert identity.is_authenticated is True


def test_identity_falls_back_to_sub():
    assert Identity.from_claims({"sub": "from-sub"}).user_id == "from-sub"


def test_identity_ignores_non_string_email():
    assert Identity.from_claims({"email": 42}).email is None


def test_identity_is_frozen():
    identity = Identity.from_claims({"sub": "immutable"})

    with pytest.raises(Exception):
        identity.user_id = "changed"  # type: ignore[misc]
