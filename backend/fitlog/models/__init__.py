from fitlog.models.workout import Workout

__all__ = [
    "Workout",
]
