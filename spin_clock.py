#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# 針がだんだん速く回り、最後にバラバラに崩れ落ちるアスキー時計
# 実行方法: python3 spin_clock.py

import sys
import math
import time

from clock_face import compose_frame
from breakapart import break_apart, simulate_pieces
from terminal import AnsiFrameWriter, hidden_cursor, install_interrupt_handler

# ==============================================================================
# 回転スケジュール
# ==============================================================================
STEPS_PER_REVOLUTION = 24
MINUTE_STEP = math.radians(15)    # π/12
HOUR_STEP = math.radians(1.25)    # π/144
INITIAL_SPEED_MS = 100
MAX_SPEED_MS = 20                 # フレーム間隔の下限
ACCELERATION_MS = 20
MAX_SPINS = 5                     # 最高速でこの回数を超えたら分解へ


class ClockState:
    def __init__(self):
        self.minute_angle = 0.0
        self.hour_angle = 0.0
        self.speed_ms = INITIAL_SPEED_MS
        self.spin_count = 0
        self.revolutions = 0

    def advance(self):
        self.minute_angle += MINUTE_STEP
        self.hour_angle += HOUR_STEP

    def end_revolution(self):
        """1周終了時の処理。分解に移るときTrueを返す"""
        self.revolutions += 1
        if self.speed_ms > MAX_SPEED_MS:
            self.speed_ms -= ACCELERATION_MS
            return False
        self.spin_count += 1
        return self.spin_count > MAX_SPINS


def spin_clock(writer, sleep=time.sleep, state=None):
    if state is None:
        state = ClockState()
    while True:
        for _ in range(STEPS_PER_REVOLUTION):
            writer.clear_screen()
            # 針は描く前に進める（最初のフレームから1ステップずれている）
            state.advance()
            writer.write_frame(compose_frame(state.minute_angle, state.hour_angle))
            sleep(state.speed_ms / 1000.0)
        if state.end_revolution():
            return state


def run(writer, sleep=time.sleep):
    state = spin_clock(writer, sleep)
    pieces = break_apart(state.minute_angle, state.hour_angle)
    return simulate_pieces(pieces, writer, sleep)


# ==============================================================================
# メイン実行部
# ==============================================================================
def play(writer, sleep=time.sleep):
    """カーソルを隠してデモを最後まで流す。出力エラーは終了コード1"""
    install_interrupt_handler(writer)
    try:
        with hidden_cursor(writer):
            run(writer, sleep)
    except OSError as e:
        print(f"Output error: {e}", file=sys.stderr)
        sys.exit(1)
    return 0


def main(argv=None):
    # 引数は受け付けない（渡されても無視する）
    return play(AnsiFrameWriter())


if __name__ == '__main__':
    sys.exit(main())
