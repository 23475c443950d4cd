"""
Cliente HTTP de los procedimientos `/rpc/*` del backend.

Traduce las respuestas de error `{"error": {"code", "message"}}` de vuelta a
las excepciones de dominio, así el resto del cliente no conoce HTTP.
"""

import logging
import os
from typing import Any

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PayloadError

from core.application.create_task import CreateTaskCommand
from core.application.delete_task import DeleteTaskCommand, DeleteTaskResult
from core.application.update_task import UpdateTaskCommand
from core.domain.errors import NotFoundError, TaskError, ValidationError
from core.domain.models.task import Task

logger = logging.getLogger(__name__)

_task_adapter = TypeAdapter(Task)
_task_list_adapter = TypeAdapter(list[Task])
_delete_result_adapter = TypeAdapter(DeleteTaskResult)

TRANSPORT_ERROR = "TRANSPORT_ERROR"
INVALID_RESPONSE = "INVALID_RESPONSE"


class RpcError(TaskError):
    """Fallo remoto sin clasificar (store caído, error interno...)."""

    def __init__(self, status_code: int, code: str, message: str) -> None:
        super().__init__(f"{code} ({status_code}): {message}")
        self.status_code = status_code
        self.code = code


class HttpTaskTransport:
    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    @classmethod
    def from_env(cls) -> "HttpTaskTransport":
        base_url = os.getenv("TASKS_API_URL", "http://127.0.0.1:8000")
        timeout = float(os.getenv("TASKS_API_TIMEOUT", "10"))
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def close(self) -> None:
        self._client.close()

    def create_task(self, cmd: CreateTaskCommand) -> Task:
        data = self._call("POST", "createTask", cmd.model_dump())
        return self._parse("createTask", _task_adapter, data)

    def get_tasks(self) -> list[Task]:
        data = self._call("GET", "getTasks")
        return self._parse("getTasks", _task_list_adapter, data)

    def update_task(self, cmd: UpdateTaskCommand) -> Task:
        data = self._call("POST", "updateTask", cmd.model_dump())
        return self._parse("updateTask", _task_adapter, data)

    def delete_task(self, cmd: DeleteTaskCommand) -> DeleteTaskResult:
        data = self._call("POST", "deleteTask", cmd.model_dump())
        return self._parse("deleteTask", _delete_result_adapter, data)

    def _call(self, method: str, procedure: str, payload: dict | None = None) -> Any:
        try:
            response = self._client.request(method, f"/rpc/{procedure}", json=payload)
        except httpx.HTTPError as e:
            logger.warning(f"🔴 {procedure}: fallo de transporte: {e}")
            raise RpcError(0, TRANSPORT_ERROR, str(e)) from e

        if response.is_success:
            try:
                return response.json()
            except ValueError as e:
                raise RpcError(
                    response.status_code, INVALID_RESPONSE, "Response body is not JSON"
                ) from e

        code, message = _read_error(response)
        logger.debug(f"{procedure} respondió {response.status_code} {code}")
        if code == "VALIDATION_ERROR":
            raise ValidationError(message)
        if code == "NOT_FOUND" and payload is not None:
            raise NotFoundError(payload["id"])
        raise RpcError(response.status_code, code, message)

    @staticmethod
    def _parse(procedure: str, adapter: TypeAdapter, data: Any) -> Any:
        try:
            return adapter.validate_python(data)
        except PayloadError as e:
            logger.warning(f"🔴 {procedure}: respuesta con forma inesperada: {e}")
            raise RpcError(200, INVALID_RESPONSE, str(e)) from e



def _read_error(response: httpx.Response) -> tuple[str, str]:
    try:
        error = response.json()["error"]
        return error["code"], error["message"]
    except (ValueError, KeyError, TypeError):
        return "HTTP_ERROR", response.text or response.reason_phrase
