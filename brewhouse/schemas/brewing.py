from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from brewhouse.sequencer.machine import RunStatus
from brewhouse.sequencer.stages import StageState


class StageDefinitionOut(BaseModel):
    id: str
    name: str
    description: str
    duration: int
    duration_display: str
    temperature: Optional[int] = None
    notes: Optional[str] = None


class StageViewOut(BaseModel):
    id: str
    name: str
    description: str
    duration: int
    temperature: Optional[int] = None
    notes: Optional[str] = None
    state: StageState
    elapsed: int

    model_config = ConfigDict(from_attributes=True)


class RunSnapshotOut(BaseModel):
    status: RunStatus
    stages: List[StageViewOut]
    current_index: int
    elapsed: int
    total_elapsed: int
    is_running: bool
    is_finished: bool
    stage_progress: int
    overall_progress: int
    completed_count: int
    elapsed_display: str
    total_elapsed_display: str

    model_config = ConfigDict(from_attributes=True)
