PROJECT_NAME = "Rockmundo Functions"
API_V1_STR = "/api/v1"
FUNCTIONS_V1_STR = "/functions/v1"
