from __future__ import annotations

import argparse
import logging
from typing import Dict, Iterable, List, Optional, Sequence

import pygame

from falling_blocks.game import Action, GameConfig, Phase, TetrisGame
from falling_blocks.storage import DEFAULT_HIGHSCORE_FILE, HighScoreStore, MemoryScoreStore
from .audio import Audio
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_SPACE: Action.START,
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_UP: Action.ROTATE,
    pygame.K_ESCAPE: Action.QUIT,
}


def events_to_actions(events: Iterable[pygame.event.Event]) -> List[Action]:
    actions: List[Action] = []
    for event in events:
        if event.type == pygame.QUIT:
            actions.append(Action.QUIT)
        elif event.type == pygame.KEYDOWN:
            action = KEY_TO_ACTION.get(event.key)
            if action is not None:
                actions.append(action)
    return actions


def play_tick(game: TetrisGame, audio: Audio, actions: Iterable[Action]) -> None:
    """Apply queued actions, then the fall timer, firing the matching sounds."""
    for action in actions:
        was_waiting = game.phase == Phase.NOT_STARTED
        game.handle_action(action)
        if was_waiting and game.phase == Phase.PLAYING:
            audio.start_music()

    if game.update() > 0:
        audio.play_clear()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks")
    p.add_argument("--seed", type=int, default=None, help="Seed for the piece randomizer")
    p.add_argument("--highscore-file", type=str, default=DEFAULT_HIGHSCORE_FILE)
    p.add_argument("--no-save", action="store_true", help="Keep the high score in memory only")
    p.add_argument("--cell-size", type=int, default=30)
    p.add_argument("--assets-dir", type=str, default=".", help="Directory holding clear.wav and music.mp3")
    p.add_argument("--no-audio", action="store_true")
    p.add_argument("--log-level", type=str, default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def run(game: TetrisGame, renderer: Renderer, audio: Audio, fps: int = 60) -> None:
    pygame.init()
    audio.open()
    try:
        clock = pygame.time.Clock()
        screen = pygame.display.set_mode(renderer.window_size)
        renderer.load_fonts()

        while not game.quit_requested:
            play_tick(game, audio, events_to_actions(pygame.event.get()))
            renderer.draw(screen, game.snapshot())
            clock.tick(fps)
    finally:
        audio.close()
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    store = MemoryScoreStore() if args.no_save else HighScoreStore(args.highscore_file)
    game = TetrisGame(
        config=GameConfig(random_seed=args.seed),
        store=store,
        clock=pygame.time.get_ticks,
    )
    renderer = Renderer(game.grid.width, game.grid.height, cell_size=args.cell_size)
    audio = Audio(args.assets_dir, enabled=not args.no_audio)
    run(game, renderer, audio)


if __name__ == "__main__":  # pragma: no cover
    main()
