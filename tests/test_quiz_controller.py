import pytest

from trivia_cbt.errors import InvalidOperation
from trivia_cbt.models.session_state import NavStatus, Phase
from trivia_cbt.services.quiz_controller import QuizController


def _assert_invariants(controller):
    for i, answer in enumerate(controller.answers):
        assert (answer is not None) == (i in controller.attempted)
    assert controller.current_index in controller.visited


def test_start_initialises_session(controller, questions):
    controller.start(questions)

    assert controller.phase is Phase.IN_PROGRESS
    assert controller.current_index == 0
    assert controller.answers == [None] * 5
    assert controller.visited == {0}
    assert controller.attempted == set()
    assert controller.flagged == set()
    assert controller.remaining_seconds == 60
    assert controller.current_question is questions[0]


def test_start_requires_questions(controller):
    with pytest.raises(InvalidOperation):
        controller.start([])
    assert controller.phase is Phase.NOT_STARTED


def test_start_twice_is_rejected(controller, questions):
    controller.start(questions)
    with pytest.raises(InvalidOperation):
        controller.start(questions)


@pytest.mark.parametrize("operation, args", [
    ("select_answer", (0,)),
    ("go_to_next", ()),
    ("go_to_previous", ()),
    ("go_to", (1,)),
    ("toggle_flag", ()),
])
def test_operations_before_start_are_rejected(controller, operation, args):
    with pytest.raises(InvalidOperation):
        getattr(controller, operation)(*args)
    assert controller.phase is Phase.NOT_STARTED


def test_select_answer_overwrites_slot(controller, questions):
    controller.start(questions)
    controller.select_answer(2)
    controller.select_answer(1)
    assert controller.answers[0] == 1
    assert controller.attempted == {0}
    _assert_invariants(controller)


@pytest.mark.parametrize("choice", [-1, 4, 99])
def test_select_answer_out_of_range(controller, questions, choice):
    controller.start(questions)
    with pytest.raises(InvalidOperation):
        controller.select_answer(choice)
    assert controller.answers[0] is None
    _assert_invariants(controller)


def test_next_and_previous(controller, questions):
    controller.start(questions)
    controller.go_to_next()
    controller.go_to_next()
    assert controller.current_index == 2
    controller.go_to_previous()
    assert controller.current_index == 1
    assert controller.visited == {0, 1, 2}
    _assert_invariants(controller)


def test_previous_at_first_question_is_noop(controller, questions):
    changes = []
    controller.start(questions)
    controller.add_listener(on_change=changes.append)
    controller.go_to_previous()
    assert controller.current_index == 0
    assert changes == []


def test_go_to_then_previous_keeps_visited(controller, questions):
    controller.start(questions)
    controller.go_to(4)
    controller.go_to_previous()
    assert controller.current_index == 3
    assert 4 in controller.visited
    assert controller.statuses()[4] is NavStatus.VISITED
    _assert_invariants(controller)


@pytest.mark.parametrize("index", [-1, 5])
def test_go_to_out_of_range(controller, questions, index):
    controller.start(questions)
    with pytest.raises(InvalidOperation):
        controller.go_to(index)
    assert controller.current_index == 0


def test_next_on_last_question_submits(controller, questions):
    controller.start(questions)
    controller.go_to(4)
    controller.go_to_next()
    assert controller.phase is Phase.SUBMITTED
    assert controller.submit_reason == "last_question"
    assert controller.report.total == 5


def test_toggle_flag_does_not_touch_answers(controller, questions):
    controller.start(questions)
    assert controller.toggle_flag() is True
    assert controller.flagged == {0}
    assert controller.answers[0] is None
    assert controller.attempted == set()
    assert controller.toggle_flag() is False
    assert controller.flagged == set()


def test_flag_shows_over_attempted_once_not_current(controller, questions):
    controller.start(questions)
    controller.select_answer(0)
    controller.toggle_flag()
    assert controller.statuses()[0] is NavStatus.CURRENT
    controller.go_to_next()
    assert controller.statuses()[0] is NavStatus.FLAGGED


def test_submit_is_idempotent(controller, questions):
    reports = []
    controller.add_listener(on_submit=reports.append)
    controller.start(questions)

    first = controller.submit()
    second = controller.submit()

    assert first is not None
    assert second is None
    assert reports == [first]
    assert controller.report is first


def test_no_mutation_after_submit(controller, questions):
    controller.start(questions)
    controller.submit()
    with pytest.raises(InvalidOperation):
        controller.select_answer(0)
    with pytest.raises(InvalidOperation):
        controller.go_to(2)
    assert controller.answers == [None] * 5


def test_submit_stops_timer(controller, questions, clock):
    controller.start(questions)
    clock.advance(5)
    controller.sync_clock()
    controller.submit()
    clock.advance(30)
    controller.sync_clock()
    assert controller.remaining_seconds == 55


def test_change_listener_fires_after_each_mutation(controller, questions):
    seen = []
    controller.add_listener(on_change=lambda s: seen.append(s.current_index))
    controller.start(questions)
    controller.select_answer(1)
    controller.go_to(3)
    controller.toggle_flag()
    controller.submit()
    assert seen == [0, 0, 3, 3, 3]


def test_scenario_manual_submit_with_skip_and_flag(controller, question_factory):
    controller.start(question_factory(3))
    controller.select_answer(0)          # Q1 correct
    controller.go_to_next()              # Q2 skipped
    controller.go_to_next()
    controller.toggle_flag()             # Q3 flagged, not answered

    report = controller.submit()

    assert report.summary() == {"correct": 1, "total": 3}
    assert not report.entries[1].answered
    assert not report.entries[2].answered


def test_scenario_timeout_submits_recorded_answers(clock, question_factory):
    controller = QuizController(duration_seconds=30, clock=clock)
    controller.start(question_factory(5))
    controller.select_answer(0)
    controller.go_to_next()
    controller.select_answer(2)
    assert controller.current_index == 1

    for _ in range(30):
        controller.tick()

    assert controller.phase is Phase.SUBMITTED
    assert controller.submit_reason == "timeout"
    assert controller.remaining_seconds == 0
    report = controller.report
    assert [e.answered for e in report.entries] == [True, True, False, False, False]
    assert report.correct == 1


def test_clock_expiry_before_operation_submits_first(clock, questions):
    controller = QuizController(duration_seconds=10, clock=clock)
    controller.start(questions)
    clock.advance(11)
    with pytest.raises(InvalidOperation):
        controller.select_answer(0)
    assert controller.phase is Phase.SUBMITTED
    assert controller.submit_reason == "timeout"


def test_manual_submit_after_timeout_keeps_single_report(clock, questions):
    reports = []
    controller = QuizController(duration_seconds=10, clock=clock)
    controller.add_listener(on_submit=reports.append)
    controller.start(questions)
    clock.advance(10)
    controller.sync_clock()
    assert controller.submit() is None
    assert len(reports) == 1


def test_restart_then_start_matches_fresh_session(controller, questions, question_factory, clock):
    controller.start(questions)
    controller.select_answer(1)
    controller.go_to(3)
    controller.toggle_flag()
    clock.advance(20)
    controller.submit()

    controller.restart()
    assert controller.phase is Phase.NOT_STARTED
    assert controller.report is None
    assert controller.remaining_seconds == 60

    controller.start(question_factory(4))
    fresh = QuizController(duration_seconds=60, clock=clock)
    fresh.start(question_factory(4))

    assert controller.snapshot() == fresh.snapshot()
    assert controller.attempted == set()
    assert controller.flagged == set()


def test_snapshot_shape(controller, questions):
    controller.start(questions)
    controller.select_answer(3)
    snap = controller.snapshot()
    assert snap["phase"] == "in_progress"
    assert snap["question"]["number"] == 1
    assert snap["question"]["selected"] == 3
    assert snap["statuses"][:2] == ["current", "unseen"]
    assert snap["remaining_display"] == "01:00"


def test_state_is_a_detached_copy(controller, questions):
    controller.start(questions)
    state = controller.state
    state.answers[0] = 1
    state.attempted.add(0)
    state.visited.add(3)
    state.flagged.add(2)
    state.phase = Phase.SUBMITTED

    assert controller.phase is Phase.IN_PROGRESS
    assert controller.answers == [None] * 5
    assert controller.visited == {0}
    assert controller.attempted == set()
    assert controller.flagged == set()
    assert controller.report is None
    _assert_invariants(controller)


def test_listener_state_cannot_change_session(controller, questions):
    controller.add_listener(on_change=lambda s: s.answers.__setitem__(0, 2))
    controller.start(questions)
    controller.go_to_next()
    assert controller.answers[0] is None
    _assert_invariants(controller)


def test_membership_accessors_are_read_only(controller, questions):
    controller.start(questions)
    controller.select_answer(0)
    controller.toggle_flag()
    for members in (controller.visited, controller.attempted, controller.flagged):
        assert isinstance(members, frozenset)
        with pytest.raises(AttributeError):
            members.add(4)
    assert controller.is_flagged(0)
    assert not controller.is_flagged(1)


def test_can_advance_blocks_unanswered_last_question(controller, questions):
    assert controller.can_advance is False
    controller.start(questions)
    assert controller.can_advance is True

    controller.go_to(4)
    assert controller.can_advance is False
    assert controller.snapshot()["can_advance"] is False

    controller.select_answer(1)
    assert controller.can_advance is True
    assert controller.snapshot()["can_advance"] is True

    controller.go_to_next()
    assert controller.phase is Phase.SUBMITTED
    assert controller.can_advance is False
