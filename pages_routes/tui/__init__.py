from pages_routes.tui.renderers import RoutesConsoleUI

__all__ = ["RoutesConsoleUI"]
