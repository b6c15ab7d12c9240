from typing import List
from fastapi import APIRouter, Depends, Request
from brewhouse.api.deps import SESSION_RUN_KEY, get_current_user, get_run_registry
from brewhouse.schemas.brewing import RunSnapshotOut, StageDefinitionOut
from brewhouse.sequencer.machine import StepSequencer
from brewhouse.sequencer.ticker import RunRegistry
from brewhouse.sequencer.timefmt import format_minutes

router = APIRouter(prefix="/brewing", dependencies=[Depends(get_current_user)])


def get_session_run(request: Request, registry: RunRegistry = Depends(get_run_registry)) -> StepSequencer:
    run_id = request.session.get(SESSION_RUN_KEY)
    if not run_id:
        run_id = registry.new_run_id()
        request.session[SESSION_RUN_KEY] = run_id
    return registry.get_or_create(run_id)


def _snapshot(run: StepSequencer) -> RunSnapshotOut:
    return RunSnapshotOut.model_validate(run.snapshot())


@router.get("/stages", response_model=List[StageDefinitionOut])
def list_stages(registry: RunRegistry = Depends(get_run_registry)):
    return [
        StageDefinitionOut(**d.to_dict(), duration_display=format_minutes(d.duration))
        for d in registry.definitions
    ]


@router.get("/run", response_model=RunSnapshotOut)
def get_run(run: StepSequencer = Depends(get_session_run)):
    return _snapshot(run)


@router.post("/run/start", response_model=RunSnapshotOut)
def start_run(run: StepSequencer = Depends(get_session_run)):
    run.start()
    return _snapshot(run)


@router.post("/run/pause", response_model=RunSnapshotOut)
def pause_run(run: StepSequencer = Depends(get_session_run)):
    run.pause()
    return _snapshot(run)


@router.post("/run/reset", response_model=RunSnapshotOut)
def reset_run(run: StepSequencer = Depends(get_session_run)):
    run.reset()
    return _snapshot(run)


@router.delete("/run", status_code=204)
def discard_run(request: Request, registry: RunRegistry = Depends(get_run_registry)):
    run_id = request.session.pop(SESSION_RUN_KEY, None)
    if run_id:
        registry.discard(run_id)
    return None
