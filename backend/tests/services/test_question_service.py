"""Question Service — lifecycle rules against the SQL stores on in-memory SQLite.

Tests cover:
    - create: blank content rejected, duplicates rejected, content trimmed
    - edit: not-found, non-owner, missing requester, no-op and blank content
    - delete: owner, admin non-owner, non-owner non-admin, cascade to answers
    - listing: all questions, per-user questions, unknown user
    - get by id after delete
"""

import uuid

import pytest
from sqlalchemy import func, select

from quora.core.domain_types import QuestionId, UserId
from quora.core.errors import (
    AuthorizationFailedError,
    DuplicateQuestionError,
    InvalidQuestionError,
    QuestionNotFoundError,
    UserNotFoundError,
)
from quora.models.answer import Answer
from quora.models.question import Question


# ─── create ──────────────────────────────────────────────────────

async def test_create_returns_record_owned_by_requester(question_service, users):
    alice = users["alice"]
    record = await question_service.create_question("What is Go?", alice.identity)

    assert record.content == "What is Go?"
    assert record.owner_id == alice.user.uuid
    assert uuid.UUID(record.id)


@pytest.mark.parametrize("content", [None, "", "    "])
async def test_create_rejects_blank_content(question_service, users, content):
    with pytest.raises(InvalidQuestionError) as exc:
        await question_service.create_question(content, users["alice"].identity)
    assert exc.value.code == "QUE-888"


async def test_create_rejects_duplicate_content(question_service, users):
    await question_service.create_question("What is Go?", users["alice"].identity)

    with pytest.raises(DuplicateQuestionError) as exc:
        await question_service.create_question("What is Go?", users["bob"].identity)
    assert exc.value.code == "QUE-999"


async def test_create_duplicate_check_uses_trimmed_content(question_service, users):
    await question_service.create_question("What is Go?", users["alice"].identity)

    with pytest.raises(DuplicateQuestionError):
        await question_service.create_question("  What is Go?  ", users["bob"].identity)


async def test_create_duplicate_check_is_case_sensitive(question_service, users):
    await question_service.create_question("What is Go?", users["alice"].identity)
    record = await question_service.create_question(
        "what is go?", users["bob"].identity,
    )
    assert record.content == "what is go?"


async def test_create_stores_trimmed_content(question_service, users):
    record = await question_service.create_question(
        "  What is Python?\n", users["alice"].identity,
    )
    stored = await question_service.get_question_by_id(record.id)
    assert stored.content == "What is Python?"


# ─── edit ────────────────────────────────────────────────────────

async def test_edit_by_owner_updates_content(question_service, users):
    alice = users["alice"]
    created = await question_service.create_question("What is Go?", alice.identity)

    edited = await question_service.edit_question(
        "What is Rust?", UserId(alice.user.uuid), created.id,
    )

    assert edited.id == created.id
    assert edited.content == "What is Rust?"
    assert (await question_service.get_question_by_id(created.id)).content == "What is Rust?"


async def test_edit_unknown_question_fails_not_found(question_service, users):
    with pytest.raises(QuestionNotFoundError) as exc:
        await question_service.edit_question(
            "What is Rust?", UserId(users["alice"].user.uuid), QuestionId("missing"),
        )
    assert exc.value.code == "QUES-001"


async def test_edit_by_non_owner_fails(question_service, users):
    created = await question_service.create_question(
        "What is Go?", users["alice"].identity,
    )
    with pytest.raises(AuthorizationFailedError) as exc:
        await question_service.edit_question(
            "What is Rust?", UserId(users["bob"].user.uuid), created.id,
        )
    assert exc.value.code == "ATHR-003"


async def test_edit_by_admin_non_owner_fails(question_service, users):
    created = await question_service.create_question(
        "What is Go?", users["alice"].identity,
    )
    with pytest.raises(AuthorizationFailedError):
        await question_service.edit_question(
            "What is Rust?", UserId(users["admin"].user.uuid), created.id,
        )


async def test_edit_without_requester_id_fails(question_service, users):
    created = await question_service.create_question(
        "What is Go?", users["alice"].identity,
    )
    with pytest.raises(AuthorizationFailedError):
        await question_service.edit_question("What is Rust?", None, created.id)


@pytest.mark.parametrize("content", [None, "", "  ", "What is Go?", "WHAT IS GO?"])
async def test_edit_rejects_blank_or_noop_content(question_service, users, content):
    alice = users["alice"]
    created = await question_service.create_question("What is Go?", alice.identity)

    with pytest.raises(InvalidQuestionError):
        await question_service.edit_question(
            content, UserId(alice.user.uuid), created.id,
        )
    assert (await question_service.get_question_by_id(created.id)).content == "What is Go?"


async def test_edit_ownership_checked_before_content(question_service, users):
    created = await question_service.create_question(
        "What is Go?", users["alice"].identity,
    )
    with pytest.raises(AuthorizationFailedError):
        await question_service.edit_question(
            "", UserId(users["bob"].user.uuid), created.id,
        )


# ─── delete ──────────────────────────────────────────────────────

async def test_delete_by_owner_returns_removed_record(question_service, users):
    alice = users["alice"]
    created = await question_service.create_question("What is Go?", alice.identity)

    removed = await question_service.delete_question(alice.identity, created.id)

    assert removed.id == created.id
    assert removed.content == "What is Go?"
    with pytest.raises(QuestionNotFoundError):
        await question_service.get_question_by_id(created.id)


async def test_delete_by_admin_non_owner_succeeds(question_service, users):
    created = await question_service.create_question(
        "What is Go?", users["alice"].identity,
    )
    removed = await question_service.delete_question(
        users["admin"].identity, created.id,
    )
    assert removed.id == created.id


async def test_delete_by_non_owner_non_admin_fails(question_service, users):
    created = await question_service.create_question(
        "What is Go?", users["alice"].identity,
    )
    with pytest.raises(AuthorizationFailedError):
        await question_service.delete_question(users["bob"].identity, created.id)
    assert await question_service.get_question_by_id(created.id)


async def test_delete_unknown_question_fails_not_found(question_service, users):
    with pytest.raises(QuestionNotFoundError):
        await question_service.delete_question(
            users["admin"].identity, QuestionId("missing"),
        )


async def test_delete_cascades_to_answers(question_service, users, test_db):
    alice, bob = users["alice"], users["bob"]
    created = await question_service.create_question("What is Go?", alice.identity)
    row = (await test_db.execute(
        select(Question).where(Question.uuid == created.id),
    )).scalar_one()
    test_db.add_all([
        Answer(uuid=str(uuid.uuid4()), ans="A language", user_id=bob.user.id, question_id=row.id),
        Answer(uuid=str(uuid.uuid4()), ans="From Google", user_id=alice.user.id, question_id=row.id),
    ])
    await test_db.commit()

    await question_service.delete_question(alice.identity, created.id)

    remaining = await test_db.scalar(
        select(func.count()).select_from(Answer).where(Answer.question_id == row.id),
    )
    assert remaining == 0


# ─── listing ─────────────────────────────────────────────────────

async def test_get_all_questions_returns_every_question(question_service, users):
    await question_service.create_question("Q1", users["alice"].identity)
    await question_service.create_question("Q2", users["bob"].identity)

    questions = await question_service.get_all_questions()

    assert [q.content for q in questions] == ["Q1", "Q2"]


async def test_get_all_questions_empty(question_service, users):
    assert await question_service.get_all_questions() == []


async def test_get_all_questions_by_user_returns_only_theirs(question_service, users):
    alice, bob = users["alice"], users["bob"]
    await question_service.create_question("Alice 1", alice.identity)
    await question_service.create_question("Bob 1", bob.identity)
    await question_service.create_question("Alice 2", alice.identity)

    questions = await question_service.get_all_questions_by_user(UserId(alice.user.uuid))

    assert [q.content for q in questions] == ["Alice 1", "Alice 2"]
    assert {q.owner_id for q in questions} == {alice.user.uuid}


async def test_get_all_questions_by_user_without_questions(question_service, users):
    assert await question_service.get_all_questions_by_user(
        UserId(users["admin"].user.uuid),
    ) == []


async def test_get_all_questions_by_unknown_user_fails(question_service, users):
    with pytest.raises(UserNotFoundError) as exc:
        await question_service.get_all_questions_by_user(UserId("no-such-user"))
    assert exc.value.code == "USR-001"


# ─── scenario ────────────────────────────────────────────────────

async def test_question_lifecycle_scenario(question_service, users):
    alice, bob = users["alice"], users["bob"]
    alice_id = UserId(alice.user.uuid)

    created = await question_service.create_question("What is Go?", alice.identity)

    with pytest.raises(DuplicateQuestionError):
        await question_service.create_question("What is Go?", alice.identity)
    with pytest.raises(InvalidQuestionError):
        await question_service.edit_question("What is Go?", alice_id, created.id)
    with pytest.raises(AuthorizationFailedError):
        await question_service.edit_question(
            "What is Rust?", UserId(bob.user.uuid), created.id,
        )

    await question_service.delete_question(alice.identity, created.id)

    with pytest.raises(QuestionNotFoundError):
        await question_service.get_question_by_id(created.id)
