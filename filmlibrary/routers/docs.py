import json

from fastapi import APIRouter, Request, Response
from fastapi.openapi.docs import get_redoc_html

router = APIRouter(tags=["docs"], include_in_schema=False)


@router.get("/docs")
def docs(request: Request):
    return get_redoc_html(openapi_url="/swagger.yaml", title=f"{request.app.title} - ReDoc")


@router.get("/swagger.yaml")
def swagger(request: Request):
    # JSON is valid YAML
    return Response(content=json.dumps(request.app.openapi(), indent=2), media_type="application/yaml")
