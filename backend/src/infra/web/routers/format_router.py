from typing import NoReturn, Optional

from fastapi import APIRouter, HTTPException, Query, status

from core.domain.formatted_value import FormattedValue
from core.exceptions.locale_not_supported_error import LocaleNotSupportedError
from core.exceptions.string_not_found_error import StringNotFoundError
from infra.adapter.json_localizer_catalog import get_localizer_catalog
from infra.web.routers.schemas.format import FormattedValueDTO, LocalesResponseDTO
from use_cases.format import FormatElapsedTimeUseCase, FormatFileSizeUseCase, FormatIpAddressUseCase

router = APIRouter(prefix="/format", tags=["Format"])

MAX_BYTE_COUNT = 2**63 - 1


def _raise_localization_error(error: Exception) -> NoReturn:
    if isinstance(error, LocaleNotSupportedError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))

    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))


@router.get(
    "/file-size",
    response_model=FormattedValueDTO,
    status_code=status.HTTP_200_OK,
    summary="Format a byte count as a localized size",
)
async def format_file_size(
    number: int = Query(alias="bytes", ge=0, le=MAX_BYTE_COUNT),
    shorter: bool = Query(default=False),
    locale: Optional[str] = Query(default=None),
) -> FormattedValue:
    use_case = FormatFileSizeUseCase(get_localizer_catalog())

    try:
        return use_case.execute(number, locale=locale, shorter=shorter)
    except (LocaleNotSupportedError, StringNotFoundError) as error:
        _raise_localization_error(error)


@router.get(
    "/elapsed-time",
    response_model=FormattedValueDTO,
    status_code=status.HTTP_200_OK,
    summary="Format a duration in milliseconds as a short localized phrase",
)
async def format_elapsed_time(
    millis: int = Query(ge=0),
    locale: Optional[str] = Query(default=None),
) -> FormattedValue:
    use_case = FormatElapsedTimeUseCase(get_localizer_catalog())

    try:
        return use_case.execute(millis, locale=locale)
    except (LocaleNotSupportedError, StringNotFoundError) as error:
        _raise_localization_error(error)


@router.get(
    "/ip-address/{packed}",
    response_model=FormattedValueDTO,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Format a packed little-endian IPv4 address",
)
async def format_ip_address(packed: int) -> FormattedValue:
    use_case = FormatIpAddressUseCase()

    try:
        return use_case.execute(packed)
    except OverflowError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"{packed} does not fit in 32 bits",
        )


@router.get(
    "/locales",
    response_model=LocalesResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_locales() -> LocalesResponseDTO:
    catalog = get_localizer_catalog()

    return LocalesResponseDTO(
        default_locale=catalog.default_locale,
        supported_locales=catalog.supported_locales(),
    )
