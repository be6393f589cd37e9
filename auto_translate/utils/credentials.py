"""
API key sources for the translation provider

Every source answers get_api_key() -> Optional[str]. A None or empty answer
means "no credential here"; the caller turns that into TranslatorUnavailable.
"""

import os
import logging
from typing import Any, List, Optional, Protocol

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .config import TranslatorSettings

logger = logging.getLogger(__name__)


class ApiKeySource(Protocol):
    def get_api_key(self) -> Optional[str]:
        ...


class StaticApiKeySource:
    """Key given directly (settings file or host code)"""

    def __init__(self, api_key: Optional[str]):
        self._api_key = api_key

    def get_api_key(self) -> Optional[str]:
        return self._api_key or None


class EnvApiKeySource:
    """Key read from an environment variable at lookup time"""

    def __init__(self, variable: str = "DEEPL_AUTH_KEY"):
        self.variable = variable

    def get_api_key(self) -> Optional[str]:
        value = os.getenv(self.variable, "").strip()
        if not value:
            logger.debug(f"Environment variable {self.variable} is empty or not set")
            return None
        return value


class SsmParameterApiKeySource:
    """
    Key stored as a (SecureString) parameter in AWS SSM Parameter Store.

    Usage:
        source = SsmParameterApiKeySource("/auto-translate/deepl/api-key")
        key = source.get_api_key()
    """

    def __init__(
        self,
        parameter_name: str,
        region_name: Optional[str] = None,
        client: Optional[Any] = None
    ):
        """
        Args:
            parameter_name: Full parameter name
            region_name: AWS region (default: boto3 resolution chain)
            client: Pre-built SSM client (created lazily otherwise)
        """
        self.parameter_name = parameter_name
        self.region_name = region_name
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = boto3.client("ssm", region_name=self.region_name)
        return self._client

    def get_api_key(self) -> Optional[str]:
        logger.info(f"Retrieving API key from SSM parameter {self.parameter_name}")
        try:
            response = self._get_client().get_parameter(
                Name=self.parameter_name,
                WithDecryption=True
            )
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "Unknown")
            logger.error(f"SSM parameter {self.parameter_name} not readable: {code}")
            return None
        except BotoCoreError as e:
            logger.error(f"SSM lookup failed for {self.parameter_name}: {e}")
            return None

        value = response.get("Parameter", {}).get("Value")
        if not value:
            logger.error(f"SSM parameter {self.parameter_name} is empty")
            return None
        return value


class ChainedApiKeySource:
    """First non-empty key wins"""

    def __init__(self, sources: List[ApiKeySource]):
        self.sources = list(sources)

    def get_api_key(self) -> Optional[str]:
        for source in self.sources:
            key = source.get_api_key()
            if key:
                return key
        return None


def api_key_source_from_settings(settings: TranslatorSettings) -> ChainedApiKeySource:
    """
    Build the lookup chain from settings.

    Order: literal key, environment variable, SSM parameter.
    """
    sources: List[ApiKeySource] = []
    if settings.api_key:
        sources.append(StaticApiKeySource(settings.api_key))
    if settings.api_key_env:
        sources.append(EnvApiKeySource(settings.api_key_env))
    if settings.ssm_parameter:
        sources.append(SsmParameterApiKeySource(
            settings.ssm_parameter,
            region_name=settings.aws_region
        ))
    return ChainedApiKeySource(sources)
