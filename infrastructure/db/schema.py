"""
Table names and select clauses for the lifting diary schema.

The DDL lives in infrastructure/db/migrations. Workout reads use one
PostgREST select with embedded resources so a workout, its exercises, their
catalog entries and sets come back from a single SQL statement (one
consistent snapshot). The repository does not rely on embedded ordering;
the application's join plan orders everything explicitly.
"""

EXERCISE_CATALOG_TABLE = "exercise_catalog"
WORKOUTS_TABLE = "workouts"
WORKOUT_EXERCISES_TABLE = "workout_exercises"
EXERCISE_SETS_TABLE = "exercise_sets"

WORKOUT_COLUMNS = (
    "id",
    "user_id",
    "name",
    "workout_date",
    "started_at",
    "completed_at",
    "created_at",
    "updated_at",
)
WORKOUT_EXERCISE_COLUMNS = ("id", "workout_id", "exercise_catalog_id", "order", "notes")
EXERCISE_SET_COLUMNS = (
    "id",
    "workout_exercise_id",
    "set_number",
    "reps",
    "weight",
    "weight_unit",
)
EXERCISE_CATALOG_COLUMNS = ("id", "name")


def _columns(columns) -> str:
    return ", ".join(columns)


# workouts -> workout_exercises -> (exercise_catalog, exercise_sets)
WORKOUT_TREE_SELECT = (
    f"{_columns(WORKOUT_COLUMNS)}, "
    f"{WORKOUT_EXERCISES_TABLE}("
    f"{_columns(WORKOUT_EXERCISE_COLUMNS)}, "
    f"{EXERCISE_CATALOG_TABLE}({_columns(EXERCISE_CATALOG_COLUMNS)}), "
    f"{EXERCISE_SETS_TABLE}({_columns(EXERCISE_SET_COLUMNS)})"
    f")"
)
