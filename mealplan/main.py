import argparse
import logging
import sys
from pathlib import Path

from mealplan.app.meal_planner_app import MealPlannerApp
from mealplan.logic.planning.selector import filter_by_protein
from mealplan.logic.reporting.plan_summary import household_summary, week_summary
from mealplan.logic.shopping.list_builder import ordered_categories
from mealplan.utilities.config import DEBUG, EXPORT_DIR, LOG_FORMAT
from mealplan.utilities.constants import MEAL_TYPES, PROTEINS
from mealplan.utilities.errors import CatalogLoadError, PlanEditError, PlanGenerationError
from mealplan.utilities.validators import PlannerConfig


def _print_plan(app: MealPlannerApp, week_number=None):
    if app.plan is None:
        print("No meal plan yet. Run 'mealplan generate' to create one.")
        return
    weeks = [app.plan.get_week(week_number)] if week_number is not None else app.plan.weeks
    for week in weeks:
        if week is None:
            raise PlanEditError(f"Week {week_number} not found")
        print(week_summary(week, app.recipes))
        print()


def cmd_generate(app, args):
    app.generate_new_plan()
    print(f"Generated {len(app.plan.weeks)} week(s) for {household_summary(app.config)}.\n")
    _print_plan(app)


def cmd_show(app, args):
    _print_plan(app, args.week)


def cmd_shopping_list(app, args):
    shopping = app.shopping_list(args.week)
    if shopping is None:
        print(f"No plan for week {args.week}.")
        return
    print(f"Shopping list - week {shopping['week_number']}")
    for category, items in ordered_categories(shopping):
        print(f"\n{category}:")
        for ingredient in items:
            print(f"  [ ] {ingredient}")


def cmd_recipes(app, args):
    for recipe in filter_by_protein(app.recipes, args.protein):
        print(f"{recipe.id:<28} {recipe.name} ({recipe.protein}) - {', '.join(recipe.tags)}")


def cmd_swap(app, args):
    item = app.swap_recipe(args.week, args.meal, args.index - 1, args.recipe)
    print(f"Week {args.week} {args.meal} #{args.index} is now {item.recipe_name}.")


def cmd_edit_days(app, args):
    days = [d.strip().capitalize() for d in args.days.split(',') if d.strip()]
    item = app.edit_batch_days(args.week, args.meal, args.index - 1, days)
    print(f"{item.recipe_name}: {', '.join(item.days)} - {item.portions} portions.")


def cmd_split(app, args):
    items = app.split_batch_to_daily(args.week, args.meal, args.index - 1)
    print(f"Split into {len(items)} daily batch(es) of {items[0].portions if items else 0} portions.")


def cmd_config(app, args):
    changes = {k: v for k, v in vars(args).items() if k in PlannerConfig.model_fields and v is not None}
    if changes:
        app.update_config(**changes)
        print("Settings saved!")
    c = app.config
    print(f"Household: {household_summary(c)}")
    print(f"Weeks to plan: {c.number_of_weeks}")
    print(f"Lunch portions/week: {c.lunch_portions}")
    print(f"Different dinners/week: {c.dinner_recipes}")
    print(f"Weekend family meals: {'yes' if c.weekend_family_meals else 'no'}")
    print(f"Child separate on weekdays: {'yes' if c.child_separate_weekdays else 'no'}")


def cmd_export_pdf(app, args):
    week_number = app.current_week if args.week is None else args.week
    out = Path(args.out) if args.out else EXPORT_DIR / f"meal_plan_week_{week_number}.pdf"
    out.write_bytes(app.export_week_pdf(week_number))
    print(f"Wrote {out}")


def _flag(value: str) -> bool:
    if value.lower() in ('1', 'true', 'yes', 'on'):
        return True
    if value.lower() in ('0', 'false', 'no', 'off'):
        return False
    raise argparse.ArgumentTypeError(f"expected yes/no, got '{value}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mealplan", description="Batch-cooking weekly meal planner")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("generate", help="Generate a new meal plan").set_defaults(func=cmd_generate)

    p = sub.add_parser("show", help="Show the saved plan")
    p.add_argument("--week", type=int)
    p.set_defaults(func=cmd_show)

    p = sub.add_parser("shopping-list", help="Categorized shopping list for a week")
    p.add_argument("--week", type=int, default=1)
    p.set_defaults(func=cmd_shopping_list)

    p = sub.add_parser("recipes", help="List catalog recipes")
    p.add_argument("--protein", choices=("all",) + PROTEINS, default="all")
    p.set_defaults(func=cmd_recipes)

    for name, func, helptext in (("swap", cmd_swap, "Swap the recipe of a batch"),
                                 ("edit-days", cmd_edit_days, "Reassign the days of a batch"),
                                 ("split", cmd_split, "Split a batch into daily batches")):
        p = sub.add_parser(name, help=helptext)
        p.add_argument("--week", type=int, default=1)
        p.add_argument("--meal", choices=MEAL_TYPES, required=True)
        p.add_argument("--index", type=int, default=1, help="1-based position in the lunch/dinner list")
        if name == "swap":
            p.add_argument("--recipe", required=True, help="id of the replacement recipe")
        if name == "edit-days":
            p.add_argument("--days", required=True, help="comma separated, e.g. Monday,Tuesday")
        p.set_defaults(func=func)

    p = sub.add_parser("config", help="Show or change household settings")
    p.add_argument("--adults", type=int)
    p.add_argument("--children", type=int)
    p.add_argument("--lunch-portions", dest="lunch_portions", type=int)
    p.add_argument("--dinner-recipes", dest="dinner_recipes", type=int)
    p.add_argument("--weekend-family-meals", dest="weekend_family_meals", type=_flag)
    p.add_argument("--child-separate-weekdays", dest="child_separate_weekdays", type=_flag)
    p.add_argument("--weeks", dest="number_of_weeks", type=int)
    p.set_defaults(func=cmd_config)

    p = sub.add_parser("export-pdf", help="Export a week's plan and shopping list as PDF")
    p.add_argument("--week", type=int)
    p.add_argument("--out")
    p.set_defaults(func=cmd_export_pdf)
    return parser


def main(argv=None) -> int:
    logging.basicConfig(level=logging.DEBUG if DEBUG else logging.WARNING, format=LOG_FORMAT)
    args = build_parser().parse_args(argv)
    try:
        app = MealPlannerApp().init()
    except CatalogLoadError as e:
        print(f"Failed to load the application: {e}", file=sys.stderr)
        return 1
    try:
        args.func(app, args)
    except PlanGenerationError as e:
        print(f"{e}. Please try again.", file=sys.stderr)
        return 1
    except ValueError as e:  # PlanEditError and pydantic validation errors
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Could not write output: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
