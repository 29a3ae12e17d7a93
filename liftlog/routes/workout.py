from fastapi import APIRouter, Depends, HTTPException, Response

from liftlog.dependencies import get_workout_repo, get_workout_set_repo
from liftlog.models.workout import Workout, WorkoutCreate, WorkoutSet, WorkoutSetCreate
from liftlog.repositories.workout import WorkoutRepository
from liftlog.repositories.workout_set import StoreWorkoutSetRepository
from liftlog.utils.log import logger

router = APIRouter(prefix="/workout", tags=["workout"])


# ---------------------- List all ---------------------------


@router.get("/all")
def get_all_workouts(repo: WorkoutRepository = Depends(get_workout_repo)) -> list[Workout]:
    return repo.get_all()


# ---------------------- Create ---------------------------


@router.post("/create", status_code=201)
def create_workout(
    data: WorkoutCreate, repo: WorkoutRepository = Depends(get_workout_repo)
) -> Workout:
    return repo.create_workout(data)


@router.post("/{workout_id}/set/add", status_code=201)
def add_set(
    workout_id: str,
    data: WorkoutSetCreate,
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    set_repo: StoreWorkoutSetRepository = Depends(get_workout_set_repo),
) -> WorkoutSet:
    if workout_repo.get_by_id(workout_id) is None:
        raise HTTPException(status_code=404, detail="Workout not found")
    return set_repo.create_set(workout_id, data)


# ---------------------- Detail ---------------------------


@router.get("/{workout_id}")
def view_workout(workout_id: str, repo: WorkoutRepository = Depends(get_workout_repo)):
    workout, sets = repo.get_workout_with_sets(workout_id)
    logger.debug(f"Fetched workout {workout_id} and {len(sets)} sets")
    return {"workout": workout, "sets": sets}


@router.post("/{workout_id}/complete")
def complete_workout(
    workout_id: str, repo: WorkoutRepository = Depends(get_workout_repo)
) -> Workout:
    return repo.complete_workout(workout_id)


# ---------------------- Delete ---------------------------


@router.delete("/{workout_id}", status_code=204)
def delete_workout(workout_id: str, repo: WorkoutRepository = Depends(get_workout_repo)):
    if repo.get_by_id(workout_id) is None:
        raise HTTPException(status_code=404, detail="Workout not found")
    repo.delete_workout_and_sets(workout_id)
    return Response(status_code=204)


@router.delete("/{workout_id}/set/{set_id}", status_code=204)
def delete_set(
    workout_id: str,
    set_id: str,
    set_repo: StoreWorkoutSetRepository = Depends(get_workout_set_repo),
):
    workout_set = set_repo.get_by_id(set_id)
    if workout_set is None or workout_set.workout_id != workout_id:
        raise HTTPException(status_code=404, detail="Set not found")
    set_repo.delete(set_id)
    return Response(status_code=204)
