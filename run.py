#!/usr/bin/env python3
"""
CLI Entry Point for the meal / exercise estimator

Usage:
    python run.py meal ラーメン
    python run.py exercise ウォーキング --duration 30
    python run.py advice --intake 2100 --burn 150 --weight 70 --target 65
    python run.py serve
"""
import argparse
import json
import logging
import sys

import config_loader
from config_loader import get_config


def load_cli_config(config_path):
    """Load config once, from --config when given"""
    try:
        return get_config(config_path)
    except Exception as e:
        print(f"[ERROR] Failed to load config: {e}")
        sys.exit(1)


def print_json(data):
    print(json.dumps(data, ensure_ascii=False, indent=2))


def cmd_meal(args):
    """Resolve a meal name against the meal catalog"""
    from agents.matcher import resolve_meal

    result = resolve_meal(args.name)
    if args.json:
        print_json(result.to_dict())
    elif result.matched:
        print(f"[OK] {args.name!r} -> {result.name} ({result.value} kcal, {result.strategy}, distance={result.distance})")
    else:
        print(f"[--] {args.name!r}: not found, please enter calories manually")
    return result


def cmd_exercise(args):
    """Resolve an exercise name and compute calories burned"""
    from pipeline import EstimatePipeline

    try:
        output = EstimatePipeline().estimate_exercise(args.name, args.duration)
    except ValueError as e:
        print(f"[ERROR] {e}")
        sys.exit(2)

    if args.json:
        print_json(output.to_dict())
    elif output.success:
        print(f"[OK] {args.name!r} -> {output.match}: {output.calories_burned} kcal in {args.duration} min")
    else:
        print(f"[--] {args.name!r}: {output.message}")
    return output


def cmd_advice(args):
    """Print daily advice for the given totals"""
    from agents.advice import AdviceAgent

    advice = AdviceAgent(use_llm=args.llm).daily_advice(
        today_intake=args.intake,
        today_burn=args.burn,
        current_weight=args.weight,
        target_weight=args.target
    )
    if args.json:
        print_json(advice.model_dump())
    else:
        print(f"\n=== Daily Advice ({advice.source}) ===")
        for line in advice.advice_text:
            print(f"  - {line}")
    return advice


def cmd_serve(args):
    """Run the HTTP API"""
    from server import create_app

    port = args.port or config_loader.SERVER_PORT()
    create_app().run(host=args.host, port=port, debug=False)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Meal / exercise calorie estimator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python run.py meal 唐揚げ弁当                  # substring hit on 唐揚げ
    python run.py exercise ジョギング -d 20        # 10 kcal/min x 20
    python run.py advice -i 1800 -b 300 -w 68 -t 65
    python run.py serve --port 3000
        """
    )

    parser.add_argument(
        "--config", "-c",
        help="Path to config.json (default: ./config.json)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Meal command
    meal_parser = subparsers.add_parser("meal", help="Look up a meal's calories")
    meal_parser.add_argument("name", help="Free-text meal name")
    meal_parser.add_argument("--json", action="store_true", help="Print JSON")

    # Exercise command
    exer_parser = subparsers.add_parser("exercise", help="Estimate calories burned")
    exer_parser.add_argument("name", help="Free-text exercise name")
    exer_parser.add_argument("--duration", "-d", type=float, required=True, help="Minutes")
    exer_parser.add_argument("--json", action="store_true", help="Print JSON")

    # Advice command
    advice_parser = subparsers.add_parser("advice", help="Daily advice from today's totals")
    advice_parser.add_argument("--intake", "-i", type=float, default=0, help="kcal eaten today")
    advice_parser.add_argument("--burn", "-b", type=float, default=0, help="kcal burned today")
    advice_parser.add_argument("--weight", "-w", type=float, help="Current weight (kg)")
    advice_parser.add_argument("--target", "-t", type=float, help="Target weight (kg)")
    advice_parser.add_argument("--llm", action="store_true", default=None, help="Ask the text-generation service first")
    advice_parser.add_argument("--json", action="store_true", help="Print JSON")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", "-p", type=int)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    load_cli_config(args.config)

    # Route to appropriate command
    commands = {
        "meal": cmd_meal,
        "exercise": cmd_exercise,
        "advice": cmd_advice,
        "serve": cmd_serve
    }

    return commands[args.command](args)


if __name__ == "__main__":
    main()
