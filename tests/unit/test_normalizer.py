"""
Unit tests for the step normalizer.

Tests for:
- Step-level validation (name, type, duration, sounds)
- Repeat rest clearing and clamping
- Subset and exercise validation
- Idempotence on already-canonical input
"""

from typing import Any, Dict, List

import pytest

from domain.models import ExerciseType, StepInput, StepType
from domain.services import WorkoutValidationError, normalize_steps
from domain.services.normalizer import REP_RANGE_PATTERN
from tests.fakes import FakeSoundCatalog


def steps(*raw: Dict[str, Any]) -> List[StepInput]:
    """Build step inputs from camelCase client payloads."""
    return [StepInput.model_validate(r) for r in raw]


def set_step(name: str = "Circuit", **overrides: Any) -> Dict[str, Any]:
    step = {
        "type": "set",
        "name": name,
        "subsets": [
            {
                "name": "Main",
                "exercises": [{"name": "Push-ups", "type": "rep", "reps": "10"}],
            }
        ],
    }
    step.update(overrides)
    return step


def exercise_step(*exercises: Dict[str, Any], subset_name: str = "Main", step_name: str = "Circuit"):
    return set_step(
        step_name,
        subsets=[{"name": subset_name, "exercises": list(exercises)}],
    )


@pytest.fixture
def is_valid_sound_key():
    return FakeSoundCatalog(keys=["beep", "chime"]).is_valid_key


def assert_rejected(raw: List[StepInput], message: str, validator=None) -> WorkoutValidationError:
    with pytest.raises(WorkoutValidationError) as exc_info:
        normalize_steps(raw, validator)
    assert exc_info.value.message == message
    assert exc_info.value.errors == [message]
    return exc_info.value


# =============================================================================
# Step-level validation
# =============================================================================


@pytest.mark.unit
class TestStepValidation:
    """Tests for step-level rules."""

    def test_empty_steps_rejected(self):
        assert_rejected([], "at least one step is required")

    def test_missing_name_rejected(self):
        assert_rejected(steps({"type": "pause", "name": "  "}), "step 1 requires name and type")

    def test_missing_type_rejected_with_position(self):
        raw = steps({"type": "pause", "name": "Rest"}, {"name": "Second"})
        assert_rejected(raw, "step 2 requires name and type")

    def test_unknown_type_rejected(self):
        assert_rejected(steps({"type": "circuit", "name": "X"}), "step 1 has invalid type")

    def test_type_is_case_and_space_insensitive(self):
        result = normalize_steps(steps(set_step(type=" SET ")))
        assert result[0].type == StepType.SET

    def test_name_trimmed(self):
        result = normalize_steps(steps({"type": "pause", "name": "  Rest  "}))
        assert result[0].name == "Rest"

    def test_pause_duration_parsed(self):
        result = normalize_steps(steps({"type": "pause", "name": "Rest", "duration": "1m"}))
        assert result[0].estimated_seconds == 60

    def test_pause_blank_duration_uses_estimated_seconds(self):
        result = normalize_steps(
            steps({"type": "pause", "name": "Rest", "duration": "", "estimatedSeconds": 15})
        )
        assert result[0].estimated_seconds == 15

    def test_bad_duration_names_step(self):
        with pytest.raises(WorkoutValidationError) as exc_info:
            normalize_steps(steps({"type": "pause", "name": "Rest", "duration": "abc"}))
        assert exc_info.value.message.startswith("invalid duration for Rest:")

    def test_pause_drops_subsets(self):
        raw = set_step("Rest", type="pause", duration="30s")
        result = normalize_steps(steps(raw))
        assert result[0].subsets == []
        assert result[0].estimated_seconds == 30

    def test_set_step_has_no_own_duration(self):
        result = normalize_steps(steps(set_step(duration="2m")))
        assert result[0].estimated_seconds == 0

    def test_orders_follow_positions(self):
        result = normalize_steps(
            steps({"type": "pause", "name": "A"}, {"type": "pause", "name": "B"})
        )
        assert [s.order for s in result] == [0, 1]
        assert all(s.id == "" for s in result)

    def test_null_fields_tolerated(self):
        result = normalize_steps(
            steps({"type": "pause", "name": "Rest", "duration": None, "soundKey": None, "pauseOptions": None})
        )
        assert result[0].sound_key == ""
        assert result[0].pause_options.auto_advance is False


@pytest.mark.unit
class TestStepSounds:
    """Tests for step sound key validation."""

    def test_unknown_step_sound_rejected(self, is_valid_sound_key):
        raw = steps({"type": "pause", "name": "Warmup", "soundKey": "gong"})
        assert_rejected(raw, "invalid sound selection for step Warmup", is_valid_sound_key)

    def test_unknown_rest_sound_rejected(self, is_valid_sound_key):
        raw = steps(set_step("Circuit", repeatRestSoundKey="gong"))
        assert_rejected(raw, "invalid rest sound selection for step Circuit", is_valid_sound_key)

    def test_known_sound_kept_trimmed(self, is_valid_sound_key):
        result = normalize_steps(
            steps({"type": "pause", "name": "Rest", "soundKey": " beep "}), is_valid_sound_key
        )
        assert result[0].sound_key == "beep"

    def test_no_validator_skips_sound_checks(self):
        result = normalize_steps(steps({"type": "pause", "name": "Rest", "soundKey": "gong"}))
        assert result[0].sound_key == "gong"


@pytest.mark.unit
class TestRepeatSettings:
    """Tests for repeat count and repeat rest normalization."""

    @pytest.mark.parametrize("count,seconds", [(1, 30), (0, 30), (3, 0), (3, -5)])
    def test_repeat_rest_cleared(self, count, seconds):
        raw = set_step(
            repeatCount=count,
            repeatRestSeconds=seconds,
            repeatRestAfterLast=True,
            repeatRestSoundKey="beep",
            repeatRestAutoAdvance=True,
        )
        step = normalize_steps(steps(raw))[0]
        assert step.repeat_rest_seconds == 0
        assert step.repeat_rest_after_last is False
        assert step.repeat_rest_sound_key == ""
        assert step.repeat_rest_auto_advance is False

    def test_repeat_rest_kept(self):
        raw = set_step(
            repeatCount=3,
            repeatRestSeconds=10,
            repeatRestAfterLast=True,
            repeatRestSoundKey="beep",
            repeatRestAutoAdvance=True,
        )
        step = normalize_steps(steps(raw))[0]
        assert step.repeat_count == 3
        assert step.repeat_rest_seconds == 10
        assert step.repeat_rest_after_last is True
        assert step.repeat_rest_sound_key == "beep"
        assert step.repeat_rest_auto_advance is True

    @pytest.mark.parametrize("count", [0, -2])
    def test_repeat_count_at_least_one(self, count):
        step = normalize_steps(steps(set_step(repeatCount=count)))[0]
        assert step.repeat_count == 1


@pytest.mark.unit
class TestPauseOptions:
    def test_pause_auto_advance_kept(self):
        step = normalize_steps(
            steps({"type": "pause", "name": "Rest", "pauseOptions": {"autoAdvance": True}})
        )[0]
        assert step.pause_options.auto_advance is True

    def test_set_step_auto_advance_cleared(self):
        step = normalize_steps(steps(set_step(pauseOptions={"autoAdvance": True})))[0]
        assert step.pause_options.auto_advance is False


# =============================================================================
# Subsets
# =============================================================================


@pytest.mark.unit
class TestSubsets:
    """Tests for subset normalization."""

    def test_set_without_subsets_rejected(self):
        assert_rejected(steps(set_step(subsets=[])), "Circuit requires at least one subset")

    def test_unnamed_subset_bad_duration_uses_synthetic_label(self):
        raw = set_step(
            subsets=[
                {"exercises": [{"name": "Squat", "reps": "5"}]},
                {"duration": "later", "exercises": [{"name": "Lunge", "reps": "5"}]},
            ]
        )
        with pytest.raises(WorkoutValidationError) as exc_info:
            normalize_steps(steps(raw))
        assert exc_info.value.message.startswith("invalid duration for subset 2 of Circuit:")

    def test_subset_duration_parsed(self):
        raw = set_step(subsets=[{"name": "A", "duration": "45s", "exercises": [{"name": "Squat"}]}])
        subset = normalize_steps(steps(raw))[0].subsets[0]
        assert subset.estimated_seconds == 45

    def test_subset_blank_duration_uses_estimated_seconds(self):
        raw = set_step(
            subsets=[{"name": "A", "estimatedSeconds": 40, "exercises": [{"name": "Squat"}]}]
        )
        assert normalize_steps(steps(raw))[0].subsets[0].estimated_seconds == 40

    def test_subset_unknown_sound_rejected(self, is_valid_sound_key):
        raw = set_step(subsets=[{"name": "Main", "soundKey": "gong", "exercises": [{"name": "Squat"}]}])
        assert_rejected(steps(raw), "invalid sound for Main", is_valid_sound_key)

    def test_unnamed_subset_keeps_empty_name(self):
        raw = set_step(subsets=[{"exercises": [{"name": "Squat"}]}])
        subset = normalize_steps(steps(raw))[0].subsets[0]
        assert subset.name == ""

    def test_superset_flag_kept(self):
        raw = set_step(
            subsets=[{"name": "A", "superset": True, "exercises": [{"name": "Squat"}, {"name": "Row"}]}]
        )
        subset = normalize_steps(steps(raw))[0].subsets[0]
        assert subset.superset is True
        assert len(subset.exercises) == 2


# =============================================================================
# Exercises
# =============================================================================


@pytest.mark.unit
class TestExercises:
    """Tests for exercise row normalization."""

    def test_unknown_exercise_type_rejected(self):
        raw = exercise_step({"name": "Stretch", "type": "yoga"})
        assert_rejected(steps(raw), "invalid exercise type for Main")

    def test_blank_type_is_rep(self):
        ex = normalize_steps(steps(exercise_step({"name": "Squat", "reps": "5"})))[0].subsets[0].exercises[0]
        assert ex.type == ExerciseType.REP

    def test_countdown_blank_duration_mentions_step(self):
        raw = set_step(
            "Intervals",
            subsets=[{"exercises": [{"name": "Sprint", "type": "countdown", "duration": ""}]}],
        )
        with pytest.raises(WorkoutValidationError) as exc_info:
            normalize_steps(steps(raw))
        assert "Intervals" in exc_info.value.message
        assert exc_info.value.message == "invalid duration for subset 1 of Intervals"

    def test_countdown_bad_duration_rejected(self):
        raw = exercise_step({"name": "Sprint", "type": "countdown", "duration": "fast"})
        assert_rejected(steps(raw), "invalid duration for Main")

    def test_countdown_non_ascii_duration_rejected(self):
        raw = exercise_step({"name": "Sprint", "type": "countdown", "duration": "\u0663\u0660s"})
        assert_rejected(steps(raw), "invalid duration for Main")

    def test_stopwatch_blank_duration_allowed(self):
        ex = normalize_steps(steps(exercise_step({"name": "Run", "type": "stopwatch"})))[0].subsets[0].exercises[0]
        assert ex.type == ExerciseType.STOPWATCH
        assert ex.duration == ""

    @pytest.mark.parametrize("reps", ["10", "10-12", "0"])
    def test_valid_reps(self, reps):
        ex = normalize_steps(steps(exercise_step({"name": "Squat", "reps": reps})))[0].subsets[0].exercises[0]
        assert ex.reps == reps

    @pytest.mark.parametrize("reps", ["abc", "10-", "-10", "10 - 12", "1.5"])
    def test_invalid_reps_rejected(self, reps):
        assert_rejected(steps(exercise_step({"name": "Squat", "reps": reps})), "invalid reps for Main")

    @pytest.mark.parametrize("reps", ["\u0661\u0660", "\uff11\uff10", "10-\u0661\u0662"])
    def test_non_ascii_digit_reps_rejected(self, reps):
        assert_rejected(steps(exercise_step({"name": "Squat", "reps": reps})), "invalid reps for Main")

    def test_numeric_reps_accepted(self):
        ex = normalize_steps(steps(exercise_step({"name": "Squat", "reps": 8})))[0].subsets[0].exercises[0]
        assert ex.reps == "8"

    def test_blank_rep_rows_skipped(self):
        raw = exercise_step(
            {"name": "Squat", "reps": "5"},
            {"name": "", "reps": "", "weight": ""},
            {"name": "Row", "reps": "8"},
        )
        exercises = normalize_steps(steps(raw))[0].subsets[0].exercises
        assert [ex.name for ex in exercises] == ["Squat", "Row"]
        assert [ex.order for ex in exercises] == [0, 1]

    def test_only_blank_rows_rejected(self):
        raw = exercise_step({"name": "  "}, {"type": "rep"})
        assert_rejected(steps(raw), "subset Main requires at least one exercise")

    def test_empty_exercise_list_rejected(self):
        assert_rejected(steps(exercise_step()), "subset Main requires at least one exercise")

    def test_reps_cleared_for_timed(self):
        raw = exercise_step({"name": "Plank", "type": "countdown", "duration": "30s", "reps": "10"})
        ex = normalize_steps(steps(raw))[0].subsets[0].exercises[0]
        assert ex.reps == ""
        assert ex.duration == "30s"

    def test_duration_cleared_for_rep(self):
        raw = exercise_step({"name": "Squat", "reps": "5", "duration": "30s"})
        ex = normalize_steps(steps(raw))[0].subsets[0].exercises[0]
        assert ex.duration == ""

    def test_exercise_sound_rejected(self, is_valid_sound_key):
        raw = exercise_step({"name": "Squat", "reps": "5", "soundKey": "gong"})
        assert_rejected(steps(raw), "invalid exercise sound for Main", is_valid_sound_key)

    def test_fields_trimmed(self):
        raw = exercise_step(
            {"exerciseId": " ex-9 ", "name": " Squat ", "reps": " 5 ", "weight": " 60kg "}
        )
        ex = normalize_steps(steps(raw))[0].subsets[0].exercises[0]
        assert (ex.exercise_id, ex.name, ex.reps, ex.weight) == ("ex-9", "Squat", "5", "60kg")

    def test_first_violation_wins(self):
        raw = steps(
            {"type": "pause", "name": "Rest", "duration": "bad"},
            {"type": "nope", "name": "X"},
        )
        with pytest.raises(WorkoutValidationError) as exc_info:
            normalize_steps(raw)
        assert exc_info.value.message.startswith("invalid duration for Rest")


@pytest.mark.unit
class TestRepRangePattern:
    def test_pattern(self):
        assert REP_RANGE_PATTERN.match("8-12")
        assert not REP_RANGE_PATTERN.match("8-12-16")


# =============================================================================
# Idempotence
# =============================================================================


@pytest.mark.unit
class TestIdempotence:
    """Re-normalizing canonical output yields the same tree."""

    def test_canonical_output_is_fixed_point(self, is_valid_sound_key):
        raw = steps(
            {"type": "pause", "name": "Warmup", "duration": "1m", "soundKey": "beep",
             "pauseOptions": {"autoAdvance": True}},
            {
                "type": "set",
                "name": "Circuit",
                "repeatCount": 3,
                "repeatRestSeconds": 20,
                "repeatRestSoundKey": "chime",
                "subsets": [
                    {"name": "A", "duration": "40s", "exercises": [
                        {"name": "Squat", "reps": "8-10", "weight": "60kg"},
                        {"name": "", "reps": ""},
                    ]},
                    {"superset": True, "exercises": [
                        {"name": "Plank", "type": "countdown", "duration": "30s"},
                        {"name": "Row", "type": "stopwatch"},
                    ]},
                ],
            },
        )
        first = normalize_steps(raw, is_valid_sound_key)

        resubmitted = [
            StepInput.model_validate(step.model_dump(mode="json", by_alias=True)) for step in first
        ]
        second = normalize_steps(resubmitted, is_valid_sound_key)

        assert [s.model_dump() for s in second] == [s.model_dump() for s in first]
