"""Services for saving recipes."""

from .nested_save import RowPlan, plan_rows, save_recipe

__all__ = [
    "RowPlan",
    "plan_rows",
    "save_recipe",
]
