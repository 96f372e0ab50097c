# Defaults shared by the CLI and the Streamlit app.

DELIMITER = ","

# the single token written when no schedule fits in the given timeslots
INFEASIBLE_TOKEN = "-1"

# seconds; None lets the search run to completion
DEFAULT_TIME_LIMIT = None

OUT_SCHEDULE = "schedule.csv"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
