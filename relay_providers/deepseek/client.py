"""DeepSeek provider adapter (OpenAI-compatible API).

DeepSeek's JSON mode accepts ``response_format={"type": "json_object"}`` but
not ``json_schema``. Schema requests are therefore degraded before every
completion and stream: the schema is written into the last user message and
the format switches to JSON-object mode (see
`relay_providers.base.utils.json_schema`). When that is not possible the
request is sent unchanged.
"""

from __future__ import annotations

from ..base.capabilities import Capabilities
from ..base.models import CompletionParams
from ..base.openai_compat import CompatibleConfig, CompatibleProvider
from ..base.utils.json_schema import degrade_json_schema
from ..config.defaults import DEEPSEEK_DEFAULT_BASE_URL

__all__ = ["DeepSeekProvider", "DEEPSEEK_CAPABILITIES"]

DEEPSEEK_CAPABILITIES = Capabilities(
    completion=True,
    streaming=True,
    tool_use=True,
    reasoning=True,
    image=False,
    pdf=False,
    embedding=False,
    list_models=True,
)


class DeepSeekProvider(CompatibleProvider):
    compat = CompatibleConfig(
        name="deepseek",
        default_base_url=DEEPSEEK_DEFAULT_BASE_URL,
        capabilities=DEEPSEEK_CAPABILITIES,
    )

    def prepare_params(self, params: CompletionParams) -> CompletionParams:
        return degrade_json_schema(params)
