from unittest.mock import MagicMock
import httpx
import pytest
from clients.mood_store_client import MoodStoreClient
from models.errors import (
    HostEnvironmentUnavailable,
    IdentityUnavailable,
    InvalidMoodSubmission,
    MoodStoreError,
)
from models.models import Coordinates, HostUser, MoodGroup, MoodRecord, ViewerIdentity
from tools.geocode_cache import GeocodeCache
from tools.location_resolver import LocationResolver
from ui.presentation import PresentationBinding
from ui.state import default_state
from utils.constants import Phase
from workflows.map_refresh_workflow import MapRefreshWorkflow

HERE = Coordinates(lat=40.99, lng=29.03)


def _record(user_id, emoji="😀"):
    return MoodRecord(
        id=f"r{user_id}",
        user_id=user_id,
        display_name=f"user{user_id}",
        emoji=emoji,
        coordinates=HERE,
        location_label="Kadıköy, İstanbul",
    )


def _binding(records=None, host_user=HostUser(id=42, display_name="Ayşe")):
    host = MagicMock()
    if host_user is None:
        host.wait_until_ready.side_effect = HostEnvironmentUnavailable("absent")
    else:
        host.wait_until_ready.return_value = host_user
    identity = MagicMock()
    identity.current_user.return_value = ViewerIdentity(user_id=42, display_name="ayse")
    records = records or []
    refresh = MagicMock()
    refresh.run.return_value = {
        "records": records,
        "groups": [
            MoodGroup(
                location_label="Kadıköy, İstanbul",
                members=records,
                representative_emoji=records[0].emoji,
                position=HERE,
                viewer_record=next((r for r in records if r.user_id == 42), None),
            )
        ]
        if records
        else [],
    }
    submit = MagicMock()
    notify = MagicMock()
    state = default_state()
    binding = PresentationBinding(host, identity, refresh, submit, notify, state=state)
    return binding, state, host, identity, refresh, submit, notify


def test_missing_host_stays_awaiting_environment():
    binding, state, host, identity, refresh, *_ = _binding(host_user=None)
    identity.current_user.return_value = None
    assert binding.advance() == Phase.AWAITING_ENVIRONMENT
    refresh.run.assert_not_called()
    host.signal_ready.assert_not_called()


def test_missing_identity_stops_at_awaiting_identity():
    binding, state, host, identity, refresh, *_ = _binding()
    identity.current_user.return_value = None
    assert binding.advance() == Phase.AWAITING_IDENTITY
    host.signal_ready.assert_called_once()
    refresh.run.assert_not_called()

    identity.current_user.return_value = ViewerIdentity(user_id=42, display_name="x")
    assert binding.advance() == Phase.READY
    host.wait_until_ready.assert_called_once()


def test_ready_fetches_and_opens_overlay_for_new_user():
    binding, state, _, _, refresh, *_ = _binding(records=[_record(7)])
    assert binding.advance() == Phase.READY
    refresh.run.assert_called_once_with({"viewer_id": 42})
    assert state["viewer"].display_name == "Ayşe"
    assert state["overlay_open"] is True
    assert [m.user_id for m in state["moods"]] == [7]


def test_ready_keeps_overlay_closed_for_returning_user():
    binding, state, *_ = _binding(records=[_record(42), _record(7)])
    binding.advance()
    assert state["overlay_open"] is False
    assert binding.own_record().user_id == 42


def test_advance_after_ready_does_nothing():
    binding, _, host, _, refresh, *_ = _binding()
    binding.advance()
    binding.advance()
    host.wait_until_ready.assert_called_once()
    refresh.run.assert_called_once()


def test_fetch_failure_is_notified_and_overlay_not_forced():
    binding, state, _, _, refresh, _, notify = _binding()
    refresh.run.side_effect = MoodStoreError("Could not load moods: down")
    assert binding.advance() == Phase.READY
    notify.assert_called_once_with("Could not load moods: down")
    assert state["overlay_open"] is False
    assert state["moods"] == []


def test_submit_requires_location():
    binding, state, _, _, _, submit, notify = _binding()
    binding.advance()
    binding.record_location(None)
    assert binding.submit("😀", "hi") is None
    submit.run.assert_not_called()
    notify.assert_called_once()


def test_submit_success_closes_overlay_and_refetches():
    binding, state, _, _, refresh, submit, _ = _binding()
    binding.advance()
    binding.record_location(HERE)
    submit.run.return_value = _record(42, "😢")
    record = binding.submit("😢", "new day")
    assert record.emoji == "😢"
    submit.run.assert_called_once_with(
        {"viewer": state["viewer"], "emoji": "😢", "status": "new day", "coordinates": HERE}
    )
    assert state["overlay_open"] is False
    assert state["submission_in_progress"] is False
    assert refresh.run.call_count == 2


def test_submit_failure_keeps_overlay_and_notifies():
    binding, state, _, _, refresh, submit, notify = _binding()
    binding.advance()
    binding.record_location(HERE)
    binding.open_overlay()
    submit.run.side_effect = InvalidMoodSubmission("Pick an emoji first.")
    assert binding.submit(None, "") is None
    notify.assert_called_with("Pick an emoji first.")
    assert state["overlay_open"] is True
    assert state["submission_in_progress"] is False
    assert refresh.run.call_count == 1


def test_focus_viewer_centres_on_own_group():
    binding, state, _, _, refresh, _, _ = _binding(records=[_record(42)])
    binding.advance()
    binding.focus_viewer()
    assert state["map_focus"]["center"] == [HERE.lat, HERE.lng]
    assert refresh.run.call_count == 2


def test_focus_viewer_without_record_notifies():
    binding, state, _, _, _, _, notify = _binding(records=[_record(7)])
    binding.advance()
    binding.focus_viewer()
    assert state["map_focus"] is None
    notify.assert_called_once()


def test_first_load_failure_defers_overlay_to_next_successful_load():
    binding, state, _, _, refresh, _, notify = _binding(records=[_record(7)])
    output = refresh.run.return_value
    refresh.run.side_effect = MoodStoreError("Could not load moods: down")
    assert binding.advance() == Phase.READY
    assert state["overlay_open"] is False

    refresh.run.side_effect = None
    refresh.run.return_value = output
    assert binding.refresh() is True
    assert state["overlay_open"] is True

    binding.close_overlay()
    binding.refresh()
    assert state["overlay_open"] is False


def test_unreachable_store_leaves_session_ready():
    supabase = MagicMock()
    query = supabase.table.return_value
    query.select.return_value = query
    query.order.return_value = query
    query.execute.side_effect = httpx.ConnectError("[Errno 111] Connection refused")
    workflow = MapRefreshWorkflow(
        MoodStoreClient(client=supabase, table="moods"),
        LocationResolver(MagicMock(), GeocodeCache()),
    )
    binding, state, *_, notify = _binding()
    binding.map_refresh_workflow = workflow

    assert binding.advance() == Phase.READY
    assert binding.refresh() is False
    assert notify.call_count == 2
    assert "Could not load moods" in notify.call_args.args[0]


def test_unexpected_ready_failure_does_not_skip_ready_entry():
    binding, state, _, _, refresh, *_ = _binding()
    refresh.run.side_effect = RuntimeError("boom")
    with pytest.raises(RuntimeError):
        binding.advance()
    assert state["phase"] == Phase.AWAITING_IDENTITY

    refresh.run.side_effect = None
    assert binding.advance() == Phase.READY
    assert state["overlay_open"] is True


def test_signed_in_viewer_resumes_after_login_redirect():
    binding, state, host, identity, refresh, *_ = _binding()
    identity.current_user.return_value = None
    assert binding.advance() == Phase.AWAITING_IDENTITY

    # The identity provider redirects back into a fresh session with no
    # launch parameters.
    fresh, fresh_state, fresh_host, fresh_identity, fresh_refresh, *_ = _binding(
        host_user=None
    )
    assert fresh.advance() == Phase.READY
    fresh_host.signal_ready.assert_called_once()
    fresh_refresh.run.assert_called_once_with({"viewer_id": 42})
    assert fresh_state["viewer"] == ViewerIdentity(user_id=42, display_name="ayse")


def test_account_without_social_id_is_notified():
    binding, state, _, identity, refresh, _, notify = _binding()
    identity.current_user.side_effect = IdentityUnavailable("no fid")
    assert binding.advance() == Phase.AWAITING_IDENTITY
    notify.assert_called_once_with("no fid")
    refresh.run.assert_not_called()


def test_submission_in_progress_spans_click_to_completion():
    binding, state, _, _, _, submit, _ = _binding()
    binding.advance()
    binding.record_location(HERE)
    binding.begin_submission()
    assert state["submission_in_progress"] is True

    seen = []

    def _run(payload):
        seen.append(state["submission_in_progress"])
        return _record(42)

    submit.run.side_effect = _run
    assert binding.submit("😀", "") is not None
    assert state["submission_in_progress"] is False
    assert seen == [True]


def test_denied_location_clears_submission_flag():
    binding, state, *_ = _binding()
    binding.advance()
    binding.begin_submission()
    assert binding.submit("😀", "") is None
    assert state["submission_in_progress"] is False


def test_focus_is_consumed_by_one_render():
    binding, state, *_ = _binding(records=[_record(42)])
    binding.advance()
    binding.focus_viewer()
    focus = binding.consume_focus()
    assert focus["center"] == [HERE.lat, HERE.lng]
    assert state["map_focus"] is None
    assert binding.consume_focus() is None
