# -*- coding: utf-8 -*-
# ANSIエスケープでの端末出力と割り込み処理

import sys
import signal
from contextlib import contextmanager

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR_SCREEN = "\033[H\033[2J\033[3J"  # カーソルホーム + 画面消去 + スクロールバック消去


class AnsiFrameWriter:
    def __init__(self, out=None):
        self.out = out if out is not None else sys.stdout

    def hide_cursor(self):
        self.out.write(HIDE_CURSOR)
        self.out.flush()

    def show_cursor(self):
        # 何度呼んでもよい（通常終了と割り込みの両方から呼ばれる）
        self.out.write(SHOW_CURSOR)
        self.out.flush()

    def clear_screen(self):
        self.out.write(CLEAR_SCREEN)

    def write_frame(self, field):
        for row in field:
            self.out.write("".join(row) + "\n")
        self.out.flush()

    def flush(self):
        self.out.flush()


@contextmanager
def hidden_cursor(writer):
    writer.hide_cursor()
    try:
        yield writer
    finally:
        writer.show_cursor()


def install_interrupt_handler(writer):
    """SIGINT/SIGTERMでカーソルを戻し、画面を消して正常終了する"""
    def handle_interrupt(signum, frame):
        writer.show_cursor()
        writer.clear_screen()
        writer.flush()
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_interrupt)
    signal.signal(signal.SIGTERM, handle_interrupt)
    return handle_interrupt
