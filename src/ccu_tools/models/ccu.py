from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CcuResponse(BaseModel):
    """Fields shared by every CCU v2 response body."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    http_status: int = Field(alias="httpStatus")
    detail: str = ""
    support_id: str | None = Field(alias="supportId", default=None)

    @property
    def ok(self) -> bool:
        return 200 <= self.http_status < 300


class PurgeResult(CcuResponse):
    estimated_seconds: float | None = Field(alias="estimatedSeconds", default=None)
    purge_id: str | None = Field(alias="purgeId", default=None)
    progress_uri: str | None = Field(alias="progressUri", default=None)
    ping_after_seconds: int | None = Field(alias="pingAfterSeconds", default=None)

    @property
    def estimated_minutes(self) -> float:
        return (self.estimated_seconds or 0) / 60


class PurgeStatus(CcuResponse):
    purge_id: str | None = Field(alias="purgeId", default=None)
    purge_status: str | None = Field(alias="purgeStatus", default=None)
    original_estimated_seconds: int | None = Field(alias="originalEstimatedSeconds", default=None)
    original_queue_length: int | None = Field(alias="originalQueueLength", default=None)
    submitted_by: str | None = Field(alias="submittedBy", default=None)
    submission_time: str | None = Field(alias="submissionTime", default=None)
    completion_time: str | None = Field(alias="completionTime", default=None)
    ping_after_seconds: int | None = Field(alias="pingAfterSeconds", default=None)

    @property
    def done(self) -> bool:
        return self.purge_status == "Done"


class QueueStatus(CcuResponse):
    queue_length: int = Field(alias="queueLength", default=0)
