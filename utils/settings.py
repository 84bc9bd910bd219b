import os
from dotenv import load_dotenv

load_dotenv()

CEP_DEFAULT = os.getenv("CEP_DEFAULT", "08071072")
CEP_RACE_TIMEOUT = float(os.getenv("CEP_RACE_TIMEOUT", "1.0"))  # segundos
CEP_REQUEST_TIMEOUT = float(os.getenv("CEP_REQUEST_TIMEOUT", "5.0"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
