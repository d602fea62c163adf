"""Default MRAN host, snapshot epoch and initial mirror configuration."""

from datetime import date

DEFAULT_MRAN_URL = "https://mran.microsoft.com"

# Environment override for the MRAN host, named after R's checkpoint.mranUrl option
MRAN_URL_ENV_VAR = "CHECKPOINT_MRAN_URL"

# Earliest snapshot MRAN ever published
FIRST_SNAPSHOT_DATE = date(2014, 9, 17)

DEFAULT_USER_AGENT = "mransnap/0.1.0"

DEFAULT_REPOS: dict[str, str] = {
    "CRAN": "https://cloud.r-project.org",
}
