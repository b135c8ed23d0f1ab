from typing import List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session
from alumni.core.db import get_db
from alumni.models.user import User
from alumni.api.auth import get_current_user
from alumni.schemas.group import GroupCreate, GroupRead, group_from_create, group_to_read
from alumni.services import groups as group_service
from alumni.services.outcomes import JoinOutcome

router = APIRouter()


@router.get("", response_model=List[GroupRead])
def get_user_groups(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Список групп, в которых состоит текущий пользователь."""
    return [group_to_read(g) for g in group_service.get_user_groups(db, current_user)]


@router.get("/{group_id}", response_model=GroupRead)
def get_group(
    group_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    group = group_service.get_group(db, group_id)
    if group is None:
        raise HTTPException(status_code=404, detail="Группа не найдена")

    # Читать группу могут только её участники
    if not group_service.user_has_access(db, group, current_user):
        raise HTTPException(status_code=403, detail="Нет доступа к группе")

    return group_to_read(group)


@router.post("", response_model=GroupRead, status_code=status.HTTP_201_CREATED)
def create_group(
    payload: GroupCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Создаёт группу, создатель становится первым участником."""
    group = group_service.create_group(db, group_from_create(payload), current_user)
    response.headers["Location"] = str(request.url_for("get_group", group_id=group.id))
    return group_to_read(group)


@router.post("/{group_id}/join", status_code=status.HTTP_204_NO_CONTENT)
def join_group(
    group_id: int,
    user_id: Optional[int] = Body(default=None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Добавляет пользователя в группу.
    В теле можно передать id пользователя, иначе вступает сам автор запроса.
    """
    outcome = group_service.join_group(db, group_id, current_user, user_id)

    if outcome is JoinOutcome.INVALID_USER:
        raise HTTPException(status_code=400, detail="Некорректный id пользователя")
    if outcome is JoinOutcome.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Группа не найдена")
    if outcome is JoinOutcome.FORBIDDEN:
        raise HTTPException(status_code=403, detail="Добавлять в группу могут только её участники")

    return Response(status_code=status.HTTP_204_NO_CONTENT)
