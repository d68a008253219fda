"""Generation endpoints.

Public endpoints for password/passphrase generation, strength checks and
the password.txt download. Every request gets its own generator session.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from api.models import (
    PasswordGenerateRequest,
    PassphraseGenerateRequest,
    GenerateResponse,
    StrengthCheckRequest,
    StrengthResponse,
    DownloadRequest,
)
from core import (
    DOWNLOAD_FILENAME,
    GeneratorSession,
    PasswordOptions,
    PassphraseOptions,
    PASSWORD_MODE,
    PASSPHRASE_MODE,
    ValidationError,
)
from password_checker import check_password_strength


router = APIRouter(tags=["Password Tools"])


def _generate(session: GeneratorSession) -> GenerateResponse:
    try:
        value = session.generate()
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return GenerateResponse(
        value=value,
        mode=session.mode,
        strength=StrengthResponse(**session.strength.to_dict()),
    )


@router.post("/password", response_model=GenerateResponse)
async def generate_new_password(request: PasswordGenerateRequest):
    """Generate a random password."""
    session = GeneratorSession(mode=PASSWORD_MODE, source="api")
    session.password_options = PasswordOptions(**request.model_dump())
    return _generate(session)


@router.post("/passphrase", response_model=GenerateResponse)
async def generate_new_passphrase(request: PassphraseGenerateRequest):
    """Generate a diceware passphrase."""
    session = GeneratorSession(mode=PASSPHRASE_MODE, source="api")
    session.passphrase_options = PassphraseOptions(
        word_count=request.word_count,
        separator=request.separator
    )
    session.password_options.include_numbers = request.include_numbers
    session.password_options.include_special_chars = request.include_special_chars
    return _generate(session)


@router.post("/strength", response_model=StrengthResponse)
async def check_strength(request: StrengthCheckRequest):
    """Estimate the strength of a password."""
    report = check_password_strength(request.password)
    return StrengthResponse(**report.to_dict())


@router.post("/download", response_class=PlainTextResponse)
async def download(request: DownloadRequest):
    """Return a value as a plain-text file attachment."""
    return PlainTextResponse(
        content=request.value,
        headers={"Content-Disposition": f'attachment; filename="{DOWNLOAD_FILENAME}"'}
    )
