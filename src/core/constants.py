"""Core constants used across h2blend modules.

This module centralizes column names, thresholds, and parser settings.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

EXPECTED_COLUMNS = (
    "Month",
    "Year",
    "Generation_MW",
    "Gas_Consumption_m3",
    "CO2_Emissions_tonns",
)
CARBON_INTENSITY_COLUMN = "Carbon_Intensity_kgCO2_MWh"
SUPPORTED_TABULAR_EXTENSIONS = (".csv", ".tsv", ".txt")
MIN_SOURCE_LINES = 2
MANUAL_PARSE_DELIMITER = ";"
SNIFF_SAMPLE_SIZE = 4096
SNIFF_DELIMITERS = ",;\t|"
KG_PER_TONNE = 1000.0

DEFAULT_PRIMARY_THRESHOLD = 350.0
DEFAULT_SECONDARY_THRESHOLD = 300.0
DEFAULT_REPORT_DIR = Path(".h2blend") / "reports"
DEFAULT_RANDOM_SEED = 42
MIN_BLEND_PERCENT = 0
MAX_BLEND_PERCENT = 100

FULLY_COMPLIANT_RATE = 100.0
MOSTLY_COMPLIANT_RATE = 80.0
AT_RISK_RATE = 50.0

DEFAULT_FACILITY_NAME = "Power Plant Facility"
REPORT_FILE_NAME = "compliance_report.json"
DEMO_SOURCE_NAME = "demo_power_plant_data.csv"
DEMO_YEARS = (2020, 2021, 2022, 2023)
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
