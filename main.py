#!/usr/bin/env python3
"""
Steal Diamond - Main entry point.

Usage:
    python main.py play [--games N] [--target N] [--seed S]
    python main.py evaluate [--agent {random,threshold}] [--games N]
    python main.py compare [--games N]
"""
import argparse
import logging

import numpy as np

from agents import BaseAgent, RandomAgent, ThresholdAgent
from diamonds import (
    DEFAULT_CONFIG,
    CLASSIC,
    GameSession,
    PlayerData,
    apply_cash_out,
    apply_game_started,
    update_high_scores,
    xp_for_next_level,
)
from diamonds.tracker import newly_unlocked
from simulation import Evaluator

CONFIGS = {"default": DEFAULT_CONFIG, "classic": CLASSIC}


def positive_int(value: str) -> int:
    """Argparse type for options that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def play(args: argparse.Namespace) -> None:
    """Play games with a threshold policy and show the profile evolve."""
    config = CONFIGS[args.rules]
    rng = np.random.default_rng(args.seed)
    player = PlayerData.new()
    high_scores = []

    for game in range(args.games):
        player = apply_game_started(player)
        session = GameSession(config, rng=rng, start_level=args.level)

        while session.is_playing and session.total_diamonds < args.target:
            hidden = session.board.get_valid_actions()
            row, col = hidden[rng.integers(len(hidden))]
            result = session.reveal(row, col)
            if result.level_cleared:
                print(f"  Level cleared! Now on level {session.level}")

        outcome = session.cash_out()
        if outcome is None:
            print(f"Game {game + 1}: BOOM on level {session.level}, "
                  f"lost {session.score} points")
            continue

        before = player.achievements
        player = apply_cash_out(player, outcome, config)
        high_scores = update_high_scores(high_scores, outcome.final_score)

        print(f"Game {game + 1}: cashed out {outcome.final_score} points "
              f"({outcome.diamonds_found} diamonds, level {session.level})")
        for achievement in newly_unlocked(before, player.achievements):
            print(f"  Achievement unlocked: {achievement.title}")

    print("\n" + "=" * 50)
    print(f"Total score:   {player.total_score}")
    print(f"Player level:  {player.level} "
          f"({player.xp}/{xp_for_next_level(player.level)} XP)")
    print(f"Diamonds:      {player.diamonds_collected}")
    print(f"Skins:         {', '.join(player.unlocked_skins)}")
    print(f"High scores:   {high_scores}")
    for mission in player.daily_missions:
        status = "done" if mission.completed else f"{mission.progress}/{mission.target}"
        print(f"Mission {mission.title:<20} {status}")


def build_agent(name: str, seed: int) -> BaseAgent:
    """Create an agent by name."""
    if name == "random":
        return RandomAgent(DEFAULT_CONFIG.max_board_size, seed=seed)
    return ThresholdAgent(DEFAULT_CONFIG.max_board_size, seed=seed)


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate a specific agent."""
    agent = build_agent(args.agent, args.seed)
    evaluator = Evaluator(
        CONFIGS[args.rules], num_episodes=args.games,
        start_level=args.level, seed=args.seed,
    )

    print(f"\nEvaluating {args.agent} over {args.games} games...")
    results = evaluator.evaluate(agent)

    print(f"Results for {args.agent}:")
    print(f"  Cash-out rate: {results['cash_out_rate']:.1%}")
    print(f"  Avg banked:    {results['avg_banked']:.1f}")
    print(f"  Best banked:   {results['best_banked']}")
    print(f"  Avg diamonds:  {results['avg_diamonds']:.1f}")
    print(f"  Avg level:     {results['avg_level']:.2f}")


def compare(args: argparse.Namespace) -> None:
    """Compare the built-in agents."""
    agents = {
        "Random": RandomAgent(seed=args.seed),
        "Threshold-3": ThresholdAgent(target_diamonds=3, seed=args.seed),
        "Threshold-8": ThresholdAgent(target_diamonds=8, seed=args.seed),
        "Threshold-15": ThresholdAgent(target_diamonds=15, seed=args.seed),
    }

    evaluator = Evaluator(
        CONFIGS[args.rules], num_episodes=args.games,
        start_level=args.level, seed=args.seed,
    )
    results = evaluator.compare(agents)

    print("\n" + "=" * 60)
    print("Agent Comparison Results")
    print("=" * 60)
    print(f"{'Agent':<16} {'Cash-out':<10} {'Avg Banked':<12} {'Avg Level':<10}")
    print("-" * 60)

    for name, metrics in results.items():
        print(
            f"{name:<16} {metrics['cash_out_rate']:>8.1%} "
            f"{metrics['avg_banked']:>12.1f} "
            f"{metrics['avg_level']:>10.2f}"
        )


def build_parser() -> argparse.ArgumentParser:
    """Command line parser for all subcommands."""
    parser = argparse.ArgumentParser(
        description="Steal Diamond - play and evaluate the diamond game"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--level", type=positive_int, default=1, help="Starting level")
    parser.add_argument(
        "--rules", choices=sorted(CONFIGS), default="default",
        help="Rule set (classic keeps only the latest reveal's score)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Auto-play games")
    play_parser.add_argument(
        "--games", type=int, default=10, help="Number of games to play"
    )
    play_parser.add_argument(
        "--target", type=positive_int, default=5, help="Diamonds to find before cashing out"
    )

    # Evaluate command
    eval_parser = subparsers.add_parser("evaluate", help="Evaluate an agent")
    eval_parser.add_argument(
        "--agent",
        choices=["random", "threshold"],
        default="threshold",
        help="Agent to evaluate",
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    # Compare command
    compare_parser = subparsers.add_parser("compare", help="Compare all agents")
    compare_parser.add_argument(
        "--games", type=int, default=100, help="Number of games per agent"
    )

    return parser


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    elif args.command == "compare":
        compare(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
