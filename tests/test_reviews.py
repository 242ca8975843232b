# tests/test_reviews.py
"""
Review submission and rating aggregation: service layer and HTTP.
"""

from datetime import datetime
from itertools import permutations

import pytest
from sqlalchemy.exc import IntegrityError

from tutorhub import models
from tutorhub.crud import review as review_crud
from tutorhub.errors import AuthorizationError, ValidationError
from tutorhub.services import review_service, session_service


# ======================
# FIXTURES
# ======================

@pytest.fixture
def tutor(make_user):
    return make_user("Tara Tutor", "tara@example.com", models.Role.TUTOR)


@pytest.fixture
def student(make_user):
    return make_user("Stu Student", "stu@example.com", models.Role.STUDENT)


@pytest.fixture
def other_student(make_user):
    return make_user("Sue Student", "sue@example.com", models.Role.STUDENT)


def _booked_session(db, tutor, student, title="Algebra basics"):
    session = session_service.create_session(
        db,
        tutor,
        title=title,
        subject="Math",
        date=datetime(2026, 11, 2, 15, 0),
        duration=60,
    )
    return session_service.book_session(db, student, session.id)


# ======================
# AGGREGATION
# ======================

@pytest.mark.parametrize("ratings", list(permutations([5, 3, 4])))
def test_rating_aggregate_is_order_independent(db_session, make_user, tutor, ratings):
    for i, rating in enumerate(ratings):
        reviewer = make_user(f"Student {i}", f"s{i}@example.com", models.Role.STUDENT)
        session = _booked_session(db_session, tutor, reviewer, title=f"Slot {i}")
        review_service.submit_review(db_session, reviewer, session.id, rating)

    db_session.refresh(tutor)
    assert tutor.rating == pytest.approx(4.0)
    assert tutor.total_reviews == 3


def test_first_review_sets_rating(db_session, tutor, student):
    session = _booked_session(db_session, tutor, student)

    review = review_service.submit_review(db_session, student, session.id, 5, "Great!")

    db_session.refresh(tutor)
    assert review.tutor_id == tutor.id
    assert review.student_id == student.id
    assert review.session_id == session.id
    assert review.comment == "Great!"
    assert tutor.rating == 5.0
    assert tutor.total_reviews == 1


def test_aggregate_matches_stored_reviews(db_session, make_user, tutor):
    ratings = [1, 2, 2, 5, 4, 3, 5]
    for i, rating in enumerate(ratings):
        reviewer = make_user(f"Student {i}", f"s{i}@example.com", models.Role.STUDENT)
        session = _booked_session(db_session, tutor, reviewer, title=f"Slot {i}")
        review_service.submit_review(db_session, reviewer, session.id, rating)

    stored = [r.rating for r in review_service.list_tutor_reviews(db_session, tutor.id)]
    db_session.refresh(tutor)
    assert sorted(stored) == sorted(ratings)
    assert tutor.total_reviews == len(stored)
    assert tutor.rating == pytest.approx(sum(stored) / len(stored))


# ======================
# ELIGIBILITY
# ======================

def test_cannot_review_someone_elses_session(db_session, tutor, student, other_student):
    session = _booked_session(db_session, tutor, student)

    with pytest.raises(ValidationError, match="Invalid session"):
        review_service.submit_review(db_session, other_student, session.id, 4)

    db_session.refresh(tutor)
    assert tutor.total_reviews == 0


def test_cannot_review_unbooked_session(db_session, tutor, student):
    session = session_service.create_session(
        db_session, tutor, title="Open", subject="Math",
        date=datetime(2026, 11, 2, 15, 0), duration=30,
    )

    with pytest.raises(ValidationError):
        review_service.submit_review(db_session, student, session.id, 4)


def test_cannot_review_unknown_session(db_session, student):
    with pytest.raises(ValidationError, match="Invalid session"):
        review_service.submit_review(db_session, student, "missing", 4)


@pytest.mark.parametrize("rating", [0, 6, -1, 4.5, True])
def test_rating_out_of_range(db_session, tutor, student, rating):
    session = _booked_session(db_session, tutor, student)

    with pytest.raises(ValidationError, match="Rating"):
        review_service.submit_review(db_session, student, session.id, rating)


def test_tutor_cannot_review(db_session, tutor, student):
    session = _booked_session(db_session, tutor, student)

    with pytest.raises(AuthorizationError):
        review_service.submit_review(db_session, tutor, session.id, 5)


def test_one_review_per_session(db_session, tutor, student):
    session = _booked_session(db_session, tutor, student)
    review_service.submit_review(db_session, student, session.id, 5)

    with pytest.raises(ValidationError, match="already reviewed"):
        review_service.submit_review(db_session, student, session.id, 1)

    db_session.refresh(tutor)
    assert tutor.rating == 5.0
    assert tutor.total_reviews == 1


# ======================
# HTTP
# ======================

def _auth(token):
    return {"Authorization": f"Bearer {token}"}


def test_submit_review_endpoint(api, register, create_session):
    tutor, tutor_token = register("Tara", "tara@example.com", "tutor")
    student, student_token = register("Stu", "stu@example.com", "student")
    session = create_session(tutor_token)
    api.post(f"/api/sessions/{session['id']}/book", headers=_auth(student_token))

    resp = api.post(
        "/api/reviews",
        json={"sessionId": session["id"], "rating": 4, "comment": "Clear explanations"},
        headers=_auth(student_token),
    )

    assert resp.status_code == 201
    review = resp.json()
    assert review["sessionId"] == session["id"]
    assert review["tutorId"] == tutor["id"]
    assert review["studentId"] == student["id"]
    assert review["rating"] == 4
    assert review["comment"] == "Clear explanations"


@pytest.mark.parametrize("rating", [0, 6])
def test_submit_review_bad_rating_endpoint(api, register, create_session, rating):
    _, tutor_token = register("Tara", "tara@example.com", "tutor")
    _, student_token = register("Stu", "stu@example.com", "student")
    session = create_session(tutor_token)
    api.post(f"/api/sessions/{session['id']}/book", headers=_auth(student_token))

    resp = api.post(
        "/api/reviews",
        json={"sessionId": session["id"], "rating": rating},
        headers=_auth(student_token),
    )

    assert resp.status_code == 400
    assert resp.json()["kind"] == "ValidationError"


def test_tutor_review_submission_forbidden(api, register, create_session):
    _, tutor_token = register("Tara", "tara@example.com", "tutor")
    session = create_session(tutor_token)

    resp = api.post(
        "/api/reviews",
        json={"sessionId": session["id"], "rating": 5},
        headers=_auth(tutor_token),
    )

    assert resp.status_code == 400
    assert resp.json()["kind"] == "AuthorizationError"


def test_tutor_reviews_minimal_disclosure(api, register, create_session):
    tutor, tutor_token = register("Tara", "tara@example.com", "tutor")
    student, student_token = register("Stu", "stu@example.com", "student")
    session = create_session(tutor_token, title="Calculus I")
    api.post(f"/api/sessions/{session['id']}/book", headers=_auth(student_token))
    api.post(
        "/api/reviews",
        json={"sessionId": session["id"], "rating": 5},
        headers=_auth(student_token),
    )

    resp = api.get(f"/api/tutors/{tutor['id']}/reviews")

    assert resp.status_code == 200
    reviews = resp.json()
    assert len(reviews) == 1
    assert reviews[0]["student"] == {"id": student["id"], "name": "Stu"}
    assert reviews[0]["session"] == {"id": session["id"], "title": "Calculus I"}
    assert "stu@example.com" not in resp.text


def test_reviews_for_unknown_tutor_is_empty(api):
    resp = api.get("/api/tutors/nobody/reviews")

    assert resp.status_code == 200
    assert resp.json() == []


def test_store_rejects_out_of_range_rating(db_session, tutor, student):
    session = _booked_session(db_session, tutor, student)

    with pytest.raises(IntegrityError):
        review_crud.create_review(
            db_session,
            session_id=session.id,
            tutor_id=tutor.id,
            student_id=student.id,
            rating=9,
        )
    db_session.rollback()
