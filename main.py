import argparse
import os
from itembag.config import DATA_DIR, DEFAULT_SAVE_FILE, ITEM_TABLE_FILE, LOG_LEVEL, SAVE_GAME_DIR
from itembag.core.app import BagApp
from itembag.utils.logger import Logger

def main():
    parser = argparse.ArgumentParser(description='Pygame Item Bag')
    parser.add_argument('--save', '-s', type=str, default=DEFAULT_SAVE_FILE,
                        help='Bag save file to load/save (default: default_bag.json)')
    parser.add_argument('--slots', '-n', type=int, default=None,
                        help='Number of bag slots (default: from save, else 10)')
    parser.add_argument('--items', '-i', type=str, default=ITEM_TABLE_FILE,
                        help='JSON file with item definitions')
    parser.add_argument('--log-level', type=str, default=LOG_LEVEL,
                        help='DEBUG, INFO, WARNING, ERROR or CRITICAL')
    args = parser.parse_args()

    if args.slots is not None and args.slots <= 0:
        parser.error("--slots must be a positive number")

    Logger.set_level(args.log_level)
    create_initial_directories()
    app = BagApp(args.save, slot_number=args.slots, item_file=args.items)
    app.run()

def create_initial_directories():
    for path in (DATA_DIR, SAVE_GAME_DIR):
        os.makedirs(path, exist_ok=True)

if __name__ == "__main__":
    main()
