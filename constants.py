# Filename for the punctuality-by-train-type CSV
DATA_FILENAME = "data_punctualite_typedetrain_comma.csv"

# Suffix of the cleaned Parquet cache written next to its CSV
CLEANED_PARQUET_SUFFIX = "_clean.parquet"

# Environment variable overriding the CSV location
ENV_DATA_PATH = "PUNCTUALITY_DATA_PATH"

# Column names of the source CSV
MONTH_COL = "Month"
TRAIN_TYPE_COL = "Train type"
OPERATED_COL = "Number of operated trains"

# Line colors, assigned by train type order and cycled past six types
PALETTE = ["#4682B4", "#FFA500", "#228B22", "#9370DB", "#DC143C", "#DAA520"]
