# admin/views/__init__.py
from .manage_options import page_manage_options

_PAGES = {
    "Gerenciar Opções": page_manage_options,
    "Gerenciar opções": page_manage_options,
    "Manage options": page_manage_options,
}


def admin_router(choice: str):
    # Unknown choice: options page
    return _PAGES.get(choice, page_manage_options)()
