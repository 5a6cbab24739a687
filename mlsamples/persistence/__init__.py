from .serializer import save_model, load_model, list_models  # noqa: F401
