"""Upload error taxonomy.

Service code raises these instead of HTTP responses; each app variant
registers a handler that renders them as plain text or JSON.
"""

from __future__ import annotations

from typing import Iterable


class UploadError(Exception):
    """Base class: a terminal failure for one upload request."""

    status_code = 500
    default_message = "Erro interno no servidor."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MethodNotAllowedError(UploadError):
    status_code = 405
    default_message = "Método não permitido"


class PayloadTooLargeError(UploadError):
    status_code = 400

    def __init__(self, limit_mb: int):
        self.limit_mb = limit_mb
        super().__init__(f"O arquivo excede o limite de tamanho de {limit_mb} MB")


class MissingFilePartError(UploadError):
    """No usable part under the upload field (absent, empty or malformed)."""

    status_code = 400
    default_message = "Erro ao obter o arquivo. Certifique-se que o campo se chama 'file'."


class DisallowedExtensionError(UploadError):
    status_code = 400

    def __init__(self, extension: str, allowed: Iterable[str]):
        self.extension = extension
        self.allowed = list(allowed)
        super().__init__(
            "Tipo de arquivo não permitido. Extensões aceitas: " + ", ".join(self.allowed)
        )


class UnsafeFilenameError(UploadError):
    """Filename would escape the upload directory."""

    status_code = 400
    default_message = "Nome de arquivo inválido."


class DirectoryCreationError(UploadError):
    status_code = 500
    default_message = "Não foi possível criar o diretório no servidor."


class FileWriteError(UploadError):
    status_code = 500
    default_message = "Não foi possível salvar o arquivo."
