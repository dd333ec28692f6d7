from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from context_manager.context import context_request_data
from logger import logger
from schema.base import GenericResponseModel


def build_api_response(generic_response: GenericResponseModel) -> JSONResponse:
    """
    Turn a service result into the HTTP reply: status_code becomes the
    response status, everything else is the JSON body.
    """
    content = jsonable_encoder(generic_response, exclude={"status_code"})

    if generic_response.status_code >= 500:
        logger.error(
            extra=context_request_data.get(),
            msg="Responding {}: {}".format(
                generic_response.status_code, generic_response.message
            ),
        )
    else:
        logger.info(
            extra=context_request_data.get(),
            msg="Responding {}".format(generic_response.status_code),
        )

    return JSONResponse(status_code=generic_response.status_code, content=content)
