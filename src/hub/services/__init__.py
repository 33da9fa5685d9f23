from src.hub.services.project_hub import ProjectHub

__all__ = ["ProjectHub"]
