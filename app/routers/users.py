# =============================================================================
# app/routers/users.py - Person CRUD Endpoints
# =============================================================================
# Maps each verb+path to one PersonService call.
# Handlers are plain functions, so FastAPI runs each request in its
# thread pool while the blocking database call is in flight.
# Errors are raised as PersonApiException subclasses and rendered by the
# handlers registered in main.py.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Response, status

from app.config import settings
from app.dependencies import PersonServiceDep
from app.exceptions import PersonNotFoundError
from core.models.person import Person, PersonWrite

router = APIRouter()

UserId = Annotated[int, Path(description="Person id")]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=list[Person])
def list_users(service: PersonServiceDep):
    """
    List every person.

    No pagination and no ordering guarantee.
    """
    return service.list_persons()


@router.post("", response_model=Person)
def create_user(body: PersonWrite, service: PersonServiceDep):
    """
    Create a person.

    Returns the stored person including the id assigned by the database.
    """
    person_id = service.create_person(body.name, body.age)
    return Person(id=person_id, name=body.name, age=body.age)


@router.put("/{user_id}", response_model=Person)
def update_user(user_id: UserId, body: PersonWrite, service: PersonServiceDep):
    """
    Replace a person's name and age.

    Echoes the request payload with the path id. An unknown id is a 404
    unless MISSING_PERSON_IS_NOT_FOUND is off, in which case it is echoed
    as if it had succeeded.
    """
    matched = service.update_person(user_id, body.name, body.age)

    if not matched and settings.MISSING_PERSON_IS_NOT_FOUND:
        raise PersonNotFoundError(user_id)

    return Person(id=user_id, name=body.name, age=body.age)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_user(user_id: UserId, service: PersonServiceDep):
    """
    Delete a person.

    Returns 204 with no body. Unknown ids follow the same rule as PUT.
    """
    matched = service.delete_person(user_id)

    if not matched and settings.MISSING_PERSON_IS_NOT_FOUND:
        raise PersonNotFoundError(user_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
