"""Caller session state passed explicitly into resolution calls."""

from pydantic import BaseModel

from datenotes.constants import ROOT_NOTE_ID


class SessionContext(BaseModel):
    """Per-caller session state.

    protected_content_available mirrors whether the caller has unlocked
    protected notes; new containers inherit the parent's protected flag only
    when it is set. workspace_note_id is the hoisted workspace, if any.
    """

    protected_content_available: bool = False
    workspace_note_id: str | None = None

    @property
    def is_workspace_active(self) -> bool:
        return (
            self.workspace_note_id is not None
            and self.workspace_note_id != ROOT_NOTE_ID
        )
