from .menu import Menu, MenuOption
