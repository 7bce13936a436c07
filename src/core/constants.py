"""Core constants used across Statfeed modules.

This module centralizes source labels, endpoints, and export headers.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from core.types import PortDefinition

DEFAULT_IMMIGRATION_BASE_URL = "https://storage.googleapis.com/beppu_dmp/immigration/year/"
DEFAULT_MOBILITY_URL = (
    "https://storage.googleapis.com/beppu_dmp/peopleflow/beppu/"
    "top_meshcode_2024_000000000000.json"
)
DEFAULT_SUMMARY_URL = (
    "https://storage.googleapis.com/beppu_dmp/peopleflow/beppu/top_meshcode_AI_summary.json"
)
DEFAULT_ANALYTICS_START_DATE = "2023-01-01"
DEFAULT_ANALYTICS_END_DATE = "today"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = "info"
DATASET_FILE_SUFFIX = ".json"

INBOUND_FLOW = "入国"
OUTBOUND_FLOW = "出国"
FLOW_DIRECTIONS = (INBOUND_FLOW, OUTBOUND_FLOW)
TOTAL_CATEGORY = "総数"
UNKNOWN_DIMENSION_LABEL = "不明"
UNKNOWN_COUNTRY_ID = "UNKN"
DEFAULT_COUNTRY_ID = "JP"
DEFAULT_PORT_ID = "oitaairport"
PORT_DEFINITIONS = (
    PortDefinition(port_id="oitaairport", label="大分空港"),
    PortDefinition(port_id="oitaport", label="大分港"),
    PortDefinition(port_id="saganosekiport", label="佐賀関港"),
)

MOBILITY_PERIOD_FIELD = "month"
MOBILITY_METRIC_FIELD = "allday"
MOBILITY_DIMENSION_FIELD = "country"
ANALYTICS_PERIOD_FIELD = "yearMonth"
ANALYTICS_DIMENSION_FIELD = "countryId"
ANALYTICS_METRIC_FIELDS = ("sessions", "activeUsers")

BREAKDOWN_CSV_HEADER = ("年", "国籍", INBOUND_FLOW, OUTBOUND_FLOW)
TREND_CSV_PERIOD_LABEL = "年"
ANALYTICS_CSV_HEADER = ("countryId", "yearMonth", "sessions", "activeUsers")
UTF8_BOM = "\ufeff"
