"""
Unit tests for the auth event logger and the admin audit endpoint.
"""
import uuid
from unittest.mock import Mock, patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from catalog_platform.catalog_platform.auth_service.models import AuthEvent, UserRole
from catalog_platform.catalog_platform.auth_service.utils.event_logger import log_auth_event

from .conftest import auth_header_for, make_user


@pytest.fixture
def mock_request():
    """Create a mock FastAPI Request object."""
    request = Mock()
    request.client = Mock()
    request.client.host = "192.168.1.1"
    request.headers = {"user-agent": "Mozilla/5.0 Test Browser"}
    return request


def test_log_auth_event_creates_record(auth_session, mock_request):
    user_id = uuid.uuid4()
    log_auth_event("login_success", mock_request, auth_session, user_id=user_id, email="a@example.com")

    events = auth_session.query(AuthEvent).all()
    assert len(events) == 1
    event = events[0]
    assert event.user_id == user_id
    assert event.email == "a@example.com"
    assert event.event_type == "login_success"
    assert event.ip_address == "192.168.1.1"
    assert event.user_agent == "Mozilla/5.0 Test Browser"
    assert event.timestamp is not None
    assert event.event_metadata == {}


def test_log_auth_event_uses_forwarded_for_without_client(auth_session):
    request = Mock()
    request.client = None
    request.headers = {"x-forwarded-for": "203.0.113.5, 10.0.0.1"}

    log_auth_event("login_failure", request, auth_session, email="b@example.com", metadata={"reason": "unknown_email"})

    event = auth_session.query(AuthEvent).one()
    assert event.ip_address == "203.0.113.5"
    assert event.user_agent is None
    assert event.event_metadata == {"reason": "unknown_email"}


def test_log_auth_event_rejects_unknown_type(auth_session, mock_request):
    with pytest.raises(ValueError, match="Invalid event_type"):
        log_auth_event("logout", mock_request, auth_session)


def test_log_auth_event_swallows_storage_errors(mock_request):
    db = Mock()
    db.commit.side_effect = SQLAlchemyError("disk full")

    log_auth_event("register", mock_request, db, email="c@example.com")

    db.rollback.assert_called_once()


def test_to_dict_serializes_fields(auth_session, mock_request):
    user_id = uuid.uuid4()
    log_auth_event("register", mock_request, auth_session, user_id=user_id, email="d@example.com")

    data = auth_session.query(AuthEvent).one().to_dict()
    assert data["user_id"] == str(user_id)
    assert data["event_type"] == "register"
    assert data["metadata"] == {}
    assert "T" in data["timestamp"]


def test_auth_events_endpoint_requires_admin(auth_client, auth_session):
    user = make_user(auth_session)
    assert auth_client.get("/admin/auth-events").status_code == 401
    assert auth_client.get("/admin/auth-events", headers=auth_header_for(user)).status_code == 403


def test_auth_events_endpoint_filters_and_limits(auth_client, auth_session, mock_request):
    admin = make_user(auth_session, name="Admin", role=UserRole.ADMIN)
    target = uuid.uuid4()
    log_auth_event("register", mock_request, auth_session, user_id=target, email="t@example.com")
    log_auth_event("login_failure", mock_request, auth_session, user_id=target, email="t@example.com")
    log_auth_event("login_failure", mock_request, auth_session, email="x@example.com")
    headers = auth_header_for(admin)

    all_events = auth_client.get("/admin/auth-events", headers=headers)
    assert all_events.status_code == 200
    assert len(all_events.json()) == 3

    failures = auth_client.get("/admin/auth-events", params={"event_type": "login_failure"}, headers=headers)
    assert len(failures.json()) == 2

    by_user = auth_client.get("/admin/auth-events", params={"user_id": str(target)}, headers=headers)
    assert {e["event_type"] for e in by_user.json()} == {"register", "login_failure"}

    limited = auth_client.get("/admin/auth-events", params={"limit": 1}, headers=headers)
    assert len(limited.json()) == 1

    too_many = auth_client.get("/admin/auth-events", params={"limit": 1001}, headers=headers)
    assert too_many.status_code == 400


@pytest.mark.parametrize("limit", [0, -1])
def test_auth_events_endpoint_rejects_non_positive_limit(auth_client, auth_session, limit):
    admin = make_user(auth_session, name="Admin", role=UserRole.ADMIN)

    response = auth_client.get("/admin/auth-events", params={"limit": limit}, headers=auth_header_for(admin))
    assert response.status_code == 422
