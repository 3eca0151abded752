"""
cURL import API routes.
"""

from fastapi import APIRouter

from ..exceptions import CurlImportError
from ..schemas.curl import CurlImportRequest, CurlImportResponse
from ..services.curl_import import import_curl


router = APIRouter(prefix="/api/import", tags=["import"])


@router.post("/curl", response_model=CurlImportResponse)
def import_curl_command(payload: CurlImportRequest):
    """
    Import a pasted cURL command into the current request.

    Raises:
        CurlImportError: 400 if the text is not a cURL command with a URL
    """
    partial = import_curl(payload.text)
    if partial is None:
        raise CurlImportError()

    return CurlImportResponse(partial=partial, spec=partial.apply_to(payload.current))
