from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from typing import Dict, Any
from mybatis_log_converter.utils.timing import timed

from mybatis_log_converter import config  # Global config

from ..services.log_conversion import InputTooLarge, InvalidConversionRequest, LogConverter
from ..services.log_conversion.tool import TOOLS
from ..services.log_conversion.utils.result_formatter import create_result_dictionary
from mybatis_log_converter.utils.logger import setup_logger

api_router = APIRouter(prefix='/api/v1')

# Converter bound to the defaults from settings.yaml
log_converter = LogConverter.from_config(config)

# Setup logger for API
logger = setup_logger('api_routes')


def _run_conversion(log_text: str, display_mode: str, dialect: str | None) -> dict:
    result = log_converter.convert(log_text, display_mode=display_mode, dialect=dialect)
    return create_result_dictionary(result, display_mode=display_mode, dialect=dialect)


@api_router.get('/')
def root():
    """Root endpoint of the API.

    Returns a simple JSON message indicating the API is running.
    {
        "message": "API is running"
    }
    """
    return JSONResponse({"message": "API is running"})


@api_router.get('/tools')
def list_tools():
    """List the tools this API serves, with their routing metadata."""
    return JSONResponse([tool.to_dict() for tool in TOOLS])


@api_router.post('/mybatis/convert')
def convert_mybatis_log_endpoint(payload: Dict[str, Any] = Body(...)):
    """Convert pasted MyBatis ``Preparing:``/``Parameters:`` logs into SQL.

    Conversion failures on unusable logs are reported with HTTP 200 and
    ``success: false``; only malformed requests get an error status.
    """
    try:
        if not payload:
            return JSONResponse({'error': 'No JSON data provided'}, status_code=400)

        log_text = payload.get('log_text')
        if not isinstance(log_text, str):
            return JSONResponse({'error': 'Missing required field: log_text (string)'}, status_code=400)

        display_mode = payload.get('display_mode') or log_converter.display_mode
        dialect = payload.get('dialect') or log_converter.dialect

        result = timed(_run_conversion, log_text, display_mode, dialect)
        logger.info(
            f"Converted MyBatis log ({len(log_text)} chars): success={result['success']}, "
            f"statements={result['statement_count']}, mode={display_mode}"
        )
        return JSONResponse(result)

    except InputTooLarge as itl:
        logger.warning(f"Rejected oversized log: {itl}")
        return JSONResponse({'error': str(itl)}, status_code=413)
    except InvalidConversionRequest as icr:
        return JSONResponse({'error': str(icr)}, status_code=400)
    except Exception as e:
        logger.error(f"Unexpected error in /mybatis/convert endpoint: {str(e)}", exc_info=True)
        return JSONResponse({'error': f'An unexpected error occurred: {str(e)}'}, status_code=500)
