from .container import AppContainer, build_container, create_app_container

__all__ = ["AppContainer", "build_container", "create_app_container"]
