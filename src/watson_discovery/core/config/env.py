import os
from pathlib import Path

from dotenv import load_dotenv

# node input name -> environment variable
ENV_VARS = {
    "url": "WATSON_DISCOVERY_URL",
    "projectId": "WATSON_DISCOVERY_PROJECT_ID",
    "resultCount": "WATSON_DISCOVERY_RESULT_COUNT",
    "apiVersion": "WATSON_DISCOVERY_API_VERSION",
    "collectionIds": "WATSON_DISCOVERY_COLLECTION_IDS",
    "passagesCharacters": "WATSON_DISCOVERY_PASSAGES_CHARACTERS",
    "passagesMaxPerDocument": "WATSON_DISCOVERY_PASSAGES_MAX_PER_DOCUMENT",
    "description": "WATSON_DISCOVERY_DESCRIPTION",
}

API_KEY_ENV_VAR = "IBM_IAM_API_KEY"


def load_env_from_path(env_file_path: str | None, project_root: Path | None = None) -> None:
    if not env_file_path:
        return
    root = project_root or Path.cwd()
    path = root / env_file_path
    if path.exists():
        load_dotenv(path, override=False)


def get_env_vars(env_file_path: str | None = None, project_root: Path | None = None) -> dict[str, str]:
    load_env_from_path(env_file_path, project_root)
    return dict(os.environ)


def settings_inputs_from_env(env: dict[str, str]) -> dict[str, str]:
    """Node inputs taken from WATSON_DISCOVERY_* variables. Unset variables are left out."""
    return {name: env[var] for name, var in ENV_VARS.items() if env.get(var)}
