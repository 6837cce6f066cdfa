"""ASGI entry point: ``uvicorn product_lookup.main:app``."""
from product_lookup.application import create_application, run
from product_lookup.core.config import get_settings, load_env_file

# Load environment variables early so the settings pick them up
load_env_file()
app = create_application()


if __name__ == "__main__":
    run(get_settings())
