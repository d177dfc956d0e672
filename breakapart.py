# -*- coding: utf-8 -*-
# 文字盤を破片に分解して、重力で床に積もるまでシミュレーションする

import math
import time

import numpy as np

from clock_face import WIDTH, HEIGHT, CENTER_X, CENTER_Y, compose_frame, new_field, in_bounds

# ==============================================================================
# 物理定数
# ==============================================================================
GRAVITY = 0.2          # 1tickごとにvyへ加算
BURST_SPEED = 1.5      # 分解時の放射方向の初速
TICK_INTERVAL = 0.05   # 秒


class Piece:
    # stoppedになった後は x, y を二度と変更しない
    def __init__(self, x, y, vx, vy, char, stopped=False):
        self.x, self.y = float(x), float(y)
        self.vx, self.vy = float(vx), float(vy)
        self.char = char
        self.stopped = stopped

    def __repr__(self):
        return (f"Piece(x={self.x!r}, y={self.y!r}, vx={self.vx!r}, vy={self.vy!r}, "
                f"char={self.char!r}, stopped={self.stopped!r})")


def pieces_from_field(field):
    """空白以外のセルを中心から外向きの速度を持つ破片に変換する（行優先順）"""
    pieces = []
    for y, row in enumerate(field):
        for x, char in enumerate(row):
            if char == ' ':
                continue
            dx = x - CENTER_X
            dy = y - CENTER_Y
            distance = math.sqrt(dx * dx + dy * dy)
            if distance == 0:
                distance = 1
            pieces.append(Piece(x, y, dx / distance * BURST_SPEED, dy / distance * BURST_SPEED, char))
    return pieces


def break_apart(minute_angle, hour_angle):
    # 最後のフレームは表示せずに破片化する
    return pieces_from_field(compose_frame(minute_angle, hour_angle))


# ==============================================================================
# 破片シミュレーター
# ==============================================================================
class ParticleSimulator:
    def __init__(self, pieces, gravity=GRAVITY):
        self.pieces = pieces
        self.gravity = gravity
        self.ground = np.zeros((HEIGHT, WIDTH), dtype=bool)
        self.ticks = 0

    def is_resting_on(self, x, y):
        if y >= HEIGHT - 1:
            return True
        return 0 <= y + 1 < HEIGHT and 0 <= x < WIDTH and bool(self.ground[y + 1][x])

    def tick(self):
        """1tick進めて (field, all_stopped) を返す"""
        field = new_field()
        all_stopped = True
        for piece in self.pieces:
            if piece.stopped:
                x, y = math.floor(piece.x), math.floor(piece.y)
                if in_bounds(x, y):
                    field[y][x] = piece.char
                continue

            piece.vy += self.gravity
            new_x = piece.x + piece.vx
            new_y = piece.y + piece.vy

            # 左右の壁で反射（減衰なし）
            if not 0 <= math.floor(new_x) < WIDTH:
                piece.vx = -piece.vx
                new_x = piece.x + piece.vx

            x, y = math.floor(new_x), math.floor(new_y)
            if self.is_resting_on(x, y):
                # 着地したtickは位置を更新せず、このフレームだけ着地セルに描く
                piece.stopped = True
                if in_bounds(x, y):
                    self.ground[y][x] = True
                    field[y][x] = piece.char
            else:
                if in_bounds(x, y):
                    field[y][x] = piece.char
                piece.x, piece.y = new_x, new_y
                all_stopped = False

        self.ticks += 1
        return field, all_stopped


def simulate_pieces(pieces, writer, sleep=time.sleep):
    """全破片が止まるまでフレームを書き出し、tick数を返す"""
    simulator = ParticleSimulator(pieces)
    while True:
        writer.clear_screen()
        field, all_stopped = simulator.tick()
        writer.write_frame(field)
        if all_stopped:
            return simulator.ticks
        sleep(TICK_INTERVAL)
