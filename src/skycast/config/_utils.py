import os
from pathlib import Path


def _find_project_root() -> Path:
    """Find the project root directory (nearest parent holding pyproject.toml)."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").is_file():
            return parent
        if (parent / ".git").is_dir():
            return parent

    return Path.cwd()


def resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. SKYCAST_ENV_FILE env var (absolute, or relative to the project root)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("SKYCAST_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = _find_project_root() / "config"
    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None
