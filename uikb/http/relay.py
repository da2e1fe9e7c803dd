"""
Relay Endpoints

Code generation grounded in the knowledge base, and listing of the hosted
models that can serve it. Configuration, the API key and the knowledge base
are all read per request.
"""

import json
import traceback
from typing import Any, Optional

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel

from uikb.configs.constants import API_KEY_ENV_VAR
from uikb.configs.logging import get_logger
from uikb.configs.paths import get_paths
from uikb.configs.yaml_config import load_yaml_config
from uikb.exceptions import MissingConfigError
from uikb.ingest.writer import load_knowledge_base
from uikb.llm import LLMConfig, build_code_generation_prompt, get_provider

logger = get_logger("http.relay")

router = APIRouter()

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


# --- Request/Response Models ---


class GenerateCodeRequest(BaseModel):
    """Request body for code generation. Any truthy prompt is used as text."""
    prompt: Optional[Any] = None


class GenerateCodeResponse(BaseModel):
    """Response for code generation."""
    code: str


# --- Endpoints ---


@router.api_route("/generate-code", methods=ALL_METHODS)
async def generate_code(request: Request) -> Response:
    """
    Generate component usage code for a natural-language request.

    Body: {"prompt": "..."}. Only POST is accepted.
    """
    if request.method != "POST":
        return PlainTextResponse("Method Not Allowed", status_code=405)

    try:
        config = await run_in_threadpool(load_yaml_config)
        provider = get_provider(config)
        if not provider.is_available():
            raise MissingConfigError(f"{API_KEY_ENV_VAR} is not configured")

        knowledge_base = await run_in_threadpool(
            load_knowledge_base, get_paths(config).knowledge_base_path
        )

        body = await request.body()
        payload: Any = json.loads(body or b"{}")
        body_model = GenerateCodeRequest.model_validate(payload if isinstance(payload, dict) else {})
        if not body_model.prompt:
            return PlainTextResponse("Missing prompt in request.", status_code=400)

        user_prompt = str(body_model.prompt)
        logger.info(f"Generating code for prompt ({len(user_prompt)} chars)")
        prompt = build_code_generation_prompt(knowledge_base, user_prompt)
        response = await run_in_threadpool(provider.generate, prompt, LLMConfig())

        return JSONResponse(GenerateCodeResponse(code=response.text).model_dump())

    except Exception as e:
        logger.error(f"Code generation failed: {e}")
        return JSONResponse(
            {"message": str(e), "stack": traceback.format_exc()},
            status_code=500,
        )


@router.api_route("/list-models", methods=["GET", "POST"])
async def list_models() -> Response:
    """List hosted models that support content generation."""
    try:
        provider = get_provider(await run_in_threadpool(load_yaml_config))
        if not provider.is_available():
            return JSONResponse(
                {"error": f"{API_KEY_ENV_VAR} is not configured"},
                status_code=500,
            )
        models = await run_in_threadpool(provider.list_models)
    except Exception as e:
        logger.error(f"Model listing failed: {e}")
        return JSONResponse({"error": str(e)}, status_code=500)

    logger.info(f"Listed {len(models)} models")
    return Response(
        content=json.dumps(models, indent=2),
        media_type="application/json",
    )
