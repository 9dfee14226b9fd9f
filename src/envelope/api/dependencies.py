"""Request dependencies: settings, repositories and input validation.

Validation lives here rather than in the handlers so that it runs before the
rate limiter sees the request.
"""

import math
from typing import Annotated

from fastapi import Depends, Form, Request
from sqlalchemy.orm import Session

from envelope.core.errors import ValidationError
from envelope.core.settings import Settings
from envelope.db.session import get_db
from envelope.repositories.post_repo import PostRepository
from envelope.schemas.post import FetchParams, FetchType


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return request.app.state.settings


def get_post_repository(db: Annotated[Session, Depends(get_db)]) -> PostRepository:
    """Return a post repository bound to the request's session."""
    return PostRepository(db)


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
PostRepoDep = Annotated[PostRepository, Depends(get_post_repository)]


def submitted_text(text: Annotated[str | None, Form()] = None) -> str:
    """Return the non-empty ``text`` form field or reject the request."""
    if not text:
        raise ValidationError()
    return text


def fetch_params(
    settings: SettingsDep,
    fetch_type: Annotated[str | None, Form(alias="type")] = None,
    time: Annotated[str | None, Form()] = None,
    deviceid: Annotated[str | None, Form()] = None,
    count: Annotated[str | None, Form()] = None,
) -> FetchParams:
    """Validate the fetch form fields.

    ``type`` must be ``old`` or ``new``; ``time`` must be a finite number;
    ``deviceid`` must be present. ``count`` defaults to the configured value,
    must be a positive integer and is clamped to the configured maximum.
    """
    if fetch_type not in (FetchType.OLD.value, FetchType.NEW.value) or not time or not deviceid:
        raise ValidationError()
    try:
        since = float(time)
    except ValueError as exc:
        raise ValidationError() from exc
    if not math.isfinite(since):
        raise ValidationError()

    if count:
        try:
            limit = int(count)
        except ValueError as exc:
            raise ValidationError() from exc
        if limit < 1:
            raise ValidationError()
    else:
        limit = settings.fetch_default_count

    return FetchParams(
        type=FetchType(fetch_type),
        time=since,
        count=min(limit, settings.fetch_max_count),
        deviceid=deviceid,
    )


SubmittedText = Annotated[str, Depends(submitted_text)]
FetchParamsDep = Annotated[FetchParams, Depends(fetch_params)]
