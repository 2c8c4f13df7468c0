# Copyright (c) Microsoft. All rights reserved.

from typing import Any, ClassVar

from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

__all__ = ["AQBaseSettings", "SampleSettings"]


class AQBaseSettings(BaseSettings):
    """Base class for the settings read by the samples and helpers.

    Subclasses set ``env_prefix``; every field is then read from the environment variable
    ``{env_prefix}{FIELD_NAME}``, or from a .env file when ``env_file_path`` is given.
    Values passed explicitly take precedence, ``None`` values are ignored so that the
    environment still applies.
    """

    env_prefix: ClassVar[str] = ""

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        validate_assignment=True,
    )

    def __init__(
        self,
        env_file_path: str | None = None,
        env_file_encoding: str | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize the settings.

        Args:
            env_file_path: The path to a .env file to read the settings from.
            env_file_encoding: The encoding of the .env file, defaults to 'utf-8'.
            kwargs: Explicit values for the settings fields.
        """
        kwargs = {key: value for key, value in kwargs.items() if value is not None}
        super().__init__(
            _env_prefix=type(self).env_prefix,
            _env_file=env_file_path,
            _env_file_encoding=env_file_encoding or "utf-8",
            **kwargs,
        )

    def require(self, *field_names: str) -> None:
        """Fail fast when settings are missing.

        Args:
            field_names: The names of the fields that must hold a non blank value.

        Raises:
            ConfigurationError: Naming the environment variables of all the missing settings.
        """
        missing = [
            f"{type(self).env_prefix}{name}".upper()
            for name in field_names
            if getattr(self, name) is None or not str(getattr(self, name)).strip()
        ]
        if missing:
            raise ConfigurationError(f"Missing required settings, set the environment variables: {', '.join(missing)}.")


class SampleSettings(AQBaseSettings):
    """The settings the getting started samples read next to the ones of the chat clients.

    The field names are the environment variable names, in lower case.
    """

    anthropic_chat_model_id: str | None = None
    azure_ai_project_endpoint: str | None = None
    azure_ai_model_deployment_name: str | None = None
    azure_ai_memory_store_name: str | None = None
    azure_ai_memory_chat_model_deployment_name: str | None = None
    azure_ai_memory_embedding_model_deployment_name: str | None = None
    azure_ai_rai_policy_name: str | None = None
    ai_search_project_connection_id: str | None = None
    ai_search_index_name: str | None = None
    bing_custom_search_project_connection_id: str | None = None
    bing_custom_search_instance_name: str | None = None
    browser_automation_project_connection_id: str | None = None
    fabric_project_connection_id: str | None = None
    sharepoint_project_connection_id: str | None = None
    computer_use_screenshot_path: str | None = None
