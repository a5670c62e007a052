#!/usr/bin/env python3
"""Watch an agent play the diamond game."""
import time
import os

from diamonds import DiamondEnv
from agents import RandomAgent, ThresholdAgent


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, target: int = 0, level: int = 1):
    """Run demo games with visualization."""
    env = DiamondEnv(start_level=level, render_mode="ansi")
    if target:
        agent = ThresholdAgent(env.max_size, target_diamonds=target)
    else:
        agent = RandomAgent(env.max_size)

    print(f"Starting at level {level}, "
          f"{'cashing out after ' + str(target) + ' diamonds' if target else 'random play'}")
    print("Starting in 2 seconds...")
    time.sleep(2)

    banked_total = 0

    for game in range(games):
        obs, _ = env.reset()
        agent.reset()

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Banked so far: {banked_total}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            valid_actions = env.get_action_mask()
            action = agent.select_action(obs, valid_actions)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Banked so far: {banked_total}")
            if action == env.cash_out_action:
                print("Last move: cash out\n")
            else:
                row, col = agent.action_to_position(action)
                print(f"Last move: ({row}, {col}) reward {reward:+.0f}\n")
            print(env.render())

            if done:
                if info.get("game_state") == "CASHED_OUT":
                    banked_total += info["banked"]
                    print(f"\n*** CASHED OUT {info['banked']} ***")
                else:
                    print(f"\n*** BOOM (hit bomb) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {banked_total} points banked over {games} games ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--level", type=int, default=1, help="Starting level")
    parser.add_argument("--target", type=int, default=0,
                        help="Cash out after this many diamonds (default: random play)")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, target=args.target, level=args.level)
