"""ViewModels exposing Qt signals for views."""

from tc_gui.viewmodels.select_option_vm import SelectOptionEditorViewModel

__all__ = ["SelectOptionEditorViewModel"]
