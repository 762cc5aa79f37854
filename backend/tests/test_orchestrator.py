import asyncio

from coverletter.ai_services import GenerationError
from coverletter.orchestrator import GenerationOrchestrator, normalize_dashes
from coverletter.sessions import SessionStore

from conftest import FakeAIService

CONTEXT = ("# Resume", "Job text", "Company: Acme", "Scientist", "Acme")


def run(orchestrator):
    return asyncio.run(orchestrator.generate(*CONTEXT))


def test_normalize_dashes():
    assert normalize_dashes("Fast—reliable, 2019–2024") == "Fast,reliable, 2019-2024"
    assert normalize_dashes("plain - text") == "plain - text"


def test_both_succeed_and_session_is_stored():
    ai = FakeAIService(cover_letter="I led QA—and it worked.", bullets="• Cut cycle time 30%–40%")
    store = SessionStore()

    result = run(GenerationOrchestrator(ai, store))

    assert result.success is True
    assert result.cover_letter == "I led QA,and it worked."
    assert result.bullets == "• Cut cycle time 30%-40%"
    for text in (result.cover_letter, result.bullets):
        assert "—" not in text and "–" not in text

    session = store.get(result.session_id)
    assert session.cover_letter == result.cover_letter
    assert session.bullets == result.bullets
    assert session.role_title == "Scientist"
    assert session.company_name == "Acme"


def test_both_calls_get_the_same_context():
    ai = FakeAIService()
    run(GenerationOrchestrator(ai))

    assert sorted(call[0] for call in ai.calls) == ["bullets", "cover_letter"]
    assert all(call[1:] == CONTEXT for call in ai.calls)


def test_bullets_failure_fails_the_whole_generation():
    ai = FakeAIService(bullets_error=GenerationError("rate limited"))
    store = SessionStore()

    result = run(GenerationOrchestrator(ai, store))

    assert result.success is False
    assert "bullets" in result.error
    assert "rate limited" in result.error
    assert result.cover_letter is None and result.bullets is None
    assert len(store) == 0


def test_cover_letter_failure_names_the_cover_letter():
    ai = FakeAIService(cover_error=GenerationError("invalid api key"))

    result = run(GenerationOrchestrator(ai, SessionStore()))

    assert result.success is False
    assert result.error == "Cover letter generation failed: invalid api key"


def test_both_failures_are_reported():
    ai = FakeAIService(cover_error=RuntimeError("boom"), bullets_error=GenerationError("down"))

    result = run(GenerationOrchestrator(ai))

    assert result.error == "Cover letter generation failed: boom; Resume bullets generation failed: down"


def test_join_waits_for_slow_side():
    class SlowBullets(FakeAIService):
        async def generate_resume_bullets(self, *args):
            await asyncio.sleep(0.05)
            self.calls.append(("bullets-done",))
            return "• slow bullet"

    ai = SlowBullets()
    result = run(GenerationOrchestrator(ai))

    assert result.success is True
    assert result.bullets == "• slow bullet"
    assert ("bullets-done",) in ai.calls


def test_without_store_no_session_id():
    result = run(GenerationOrchestrator(FakeAIService()))
    assert result.success is True
    assert result.session_id is None
