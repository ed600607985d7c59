"""
Unit tests for domain models.

These tests verify:
- Enum parsing and defaulting
- Model validation
- Model serialization/deserialization (camelCase JSON)
- Computed properties
- Domain methods
"""

import json
import pytest
from pydantic import ValidationError


@pytest.mark.unit
class TestStepType:
    """Tests for StepType parsing."""

    @pytest.mark.parametrize("text", ["set", "SET", " Set "])
    def test_parse_set(self, text):
        from domain.models import StepType

        assert StepType.parse(text) == StepType.SET

    @pytest.mark.parametrize("text", ["", None, "circuit", "rest"])
    def test_parse_unknown(self, text):
        from domain.models import StepType

        assert StepType.parse(text) is None


@pytest.mark.unit
class TestExerciseType:
    """Tests for ExerciseType parsing."""

    @pytest.mark.parametrize("text", ["", "  ", None])
    def test_blank_is_rep(self, text):
        from domain.models import ExerciseType

        assert ExerciseType.parse(text) == ExerciseType.REP

    def test_parse_countdown(self):
        from domain.models import ExerciseType

        assert ExerciseType.parse(" Countdown ") == ExerciseType.COUNTDOWN

    def test_unknown_is_none(self):
        from domain.models import ExerciseType

        assert ExerciseType.parse("yoga") is None

    def test_is_timed(self):
        from domain.models import ExerciseType

        assert ExerciseType.STOPWATCH.is_timed
        assert ExerciseType.COUNTDOWN.is_timed
        assert not ExerciseType.REP.is_timed


@pytest.mark.unit
class TestWorkoutModel:
    """Tests for the Workout aggregate."""

    @pytest.fixture
    def workout(self):
        from domain.models import (
            StepType,
            SubsetExercise,
            Workout,
            WorkoutStep,
            WorkoutSubset,
        )

        return Workout(
            user_id="u1",
            name="Leg Day",
            steps=[
                WorkoutStep(type=StepType.PAUSE, name="Warmup", estimated_seconds=60),
                WorkoutStep(
                    type=StepType.SET,
                    name="Main",
                    repeat_count=3,
                    subsets=[
                        WorkoutSubset(exercises=[SubsetExercise(name="Squat")]),
                        WorkoutSubset(
                            exercises=[SubsetExercise(name="Lunge"), SubsetExercise(name="Calf")]
                        ),
                    ],
                ),
            ],
        )

    def test_total_exercises(self, workout):
        assert workout.total_exercises == 3

    def test_is_new_and_with_id(self, workout):
        assert workout.is_new
        saved = workout.with_id("w-1")
        assert saved.id == "w-1"
        assert not saved.is_new
        assert workout.id is None

    def test_step_properties(self, workout):
        warmup, main = workout.steps
        assert warmup.is_pause
        assert not main.is_pause
        assert main.repeats
        assert not warmup.repeats
        assert main.has_multiple_subsets
        assert main.subsets[0].is_solo
        assert not main.subsets[1].is_solo

    def test_str(self, workout):
        assert str(workout) == 'Workout("Leg Day", 2 steps, 3 exercises)'

    def test_name_required(self):
        from domain.models import Workout

        with pytest.raises(ValidationError):
            Workout(name="")

    def test_repeat_count_must_be_positive(self):
        from domain.models import StepType, WorkoutStep

        with pytest.raises(ValidationError):
            WorkoutStep(type=StepType.SET, name="X", repeat_count=0)

    def test_steps_are_frozen(self, workout):
        with pytest.raises(ValidationError):
            workout.steps[0].name = "Changed"

    def test_camel_case_round_trip(self, workout):
        from domain.models import Workout

        data = json.loads(workout.model_dump_json(by_alias=True))
        assert data["userId"] == "u1"
        assert data["steps"][1]["repeatCount"] == 3
        assert data["steps"][0]["pauseOptions"] == {"autoAdvance": False}
        assert data["steps"][1]["subsets"][0]["exercises"][0]["type"] == "rep"

        restored = Workout.model_validate(data)
        assert restored == workout

    def test_snake_case_accepted(self):
        from domain.models import Workout

        workout = Workout.model_validate({"name": "X", "user_id": "u2"})
        assert workout.user_id == "u2"


@pytest.mark.unit
class TestInputModels:
    """Tests for the lenient raw input models."""

    def test_nulls_become_defaults(self):
        from domain.models import StepInput

        step = StepInput.model_validate(
            {
                "type": None,
                "name": None,
                "duration": None,
                "subsets": None,
                "pauseOptions": None,
                "repeatCount": None,
                "estimatedSeconds": None,
            }
        )
        assert step.type == ""
        assert step.name == ""
        assert step.subsets == []
        assert step.pause_options.auto_advance is False
        assert step.repeat_count == 0
        assert step.estimated_seconds == 0

    def test_exercise_numbers_become_text(self):
        from domain.models import ExerciseInput

        ex = ExerciseInput.model_validate({"name": "Squat", "reps": 10, "weight": 62.5, "soundKey": None})
        assert ex.reps == "10"
        assert ex.weight == "62.5"
        assert ex.sound_key == ""

    def test_workout_request(self):
        from domain.models import WorkoutRequest

        request = WorkoutRequest.model_validate(
            {"userId": "u1", "name": "Test", "steps": [{"type": "pause", "name": "Rest"}]}
        )
        assert request.user_id == "u1"
        assert request.steps[0].type == "pause"


@pytest.mark.unit
class TestTrainingState:
    def test_total_estimated_seconds(self):
        from domain.models import Card, StepType, TrainingState

        state = TrainingState(
            training_id="t1",
            workout_id="w1",
            steps=[
                Card(id="a", type=StepType.PAUSE, estimated_seconds=10),
                Card(id="b", type=StepType.SET, estimated_seconds=25),
            ],
        )
        assert state.total_estimated_seconds == 35
        assert state.current_index == 0
        assert state.running is False
        assert state.done is False


@pytest.mark.unit
class TestSoundOption:
    def test_lead_seconds_serialized(self):
        from domain.models import SoundOption

        option = SoundOption(key="count321", label="Count", file="/sounds/count321.wav", lead_seconds=3)
        assert option.model_dump(by_alias=True)["leadSeconds"] == 3
