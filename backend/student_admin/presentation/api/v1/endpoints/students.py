"""Student management view endpoints.

Every route answers with the freshly rendered table so the frontend can
repaint from a single payload. Store failures are not HTTP errors here:
they show up in the table's ``error`` field, as the view would display
them above the table.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from student_admin.application.schemas import FieldUpdateRequest, StudentTableResponse
from student_admin.application.services import EditSessionController, build_student_table
from student_admin.domain.exceptions import EntityNotFoundError, NoActiveEditError
from student_admin.infrastructure.dependencies import (
    get_edit_session_controller,
    require_access,
)

router = APIRouter(
    prefix="/students",
    tags=["Students"],
    dependencies=[Depends(require_access)],
)


@router.get("", response_model=StudentTableResponse)
async def show_students(
    controller: EditSessionController = Depends(get_edit_session_controller),
) -> StudentTableResponse:
    """Render the table, fetching the list the first time the view is opened."""
    if not controller.mounted:
        await controller.load()
    return build_student_table(controller)


@router.post("/reload", response_model=StudentTableResponse)
async def reload_students(
    controller: EditSessionController = Depends(get_edit_session_controller),
) -> StudentTableResponse:
    """Fetch the full list again from the store."""
    await controller.load()
    return build_student_table(controller)


@router.patch("/edit", response_model=StudentTableResponse)
async def update_field(
    data: FieldUpdateRequest,
    controller: EditSessionController = Depends(get_edit_session_controller),
) -> StudentTableResponse:
    """Merge one field into the edit buffer."""
    try:
        controller.update_field(data.field, data.value)
    except NoActiveEditError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return build_student_table(controller)


@router.post("/edit/commit", response_model=StudentTableResponse)
async def commit_edit(
    controller: EditSessionController = Depends(get_edit_session_controller),
) -> StudentTableResponse:
    """Save the edit buffer to the store."""
    try:
        await controller.commit()
    except NoActiveEditError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return build_student_table(controller)


@router.post("/edit/cancel", response_model=StudentTableResponse)
async def cancel_edit(
    controller: EditSessionController = Depends(get_edit_session_controller),
) -> StudentTableResponse:
    """Leave edit mode without saving."""
    controller.cancel()
    return build_student_table(controller)


@router.post("/{student_id}/edit", response_model=StudentTableResponse)
async def begin_edit(
    student_id: str,
    controller: EditSessionController = Depends(get_edit_session_controller),
) -> StudentTableResponse:
    """Put one row in edit mode."""
    try:
        student = controller.find(student_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    controller.begin_edit(student)
    return build_student_table(controller)


@router.delete("/{student_id}", response_model=StudentTableResponse)
async def delete_student(
    student_id: str,
    controller: EditSessionController = Depends(get_edit_session_controller),
) -> StudentTableResponse:
    """Delete a student in the store and drop the row."""
    await controller.remove(student_id)
    return build_student_table(controller)
