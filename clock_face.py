# -*- coding: utf-8 -*-
# アナログ時計の文字盤をテキストのフィールドに描画する

import math

# ==============================================================================
# フィールド定数
# ==============================================================================
WIDTH = 80
HEIGHT = 24
CENTER_X = WIDTH // 2
CENTER_Y = HEIGHT // 2
X_SCALE = 2  # 文字セルは縦長なので横方向を2倍にする

CIRCLE_RADIUS = HEIGHT // 2 - 2   # 10
MARKER_RADIUS = HEIGHT // 2 - 3   # 9
HOUR_HAND_LENGTH = HEIGHT // 4    # 6
MINUTE_HAND_LENGTH = HEIGHT // 2 - 4  # 8

CIRCLE_CHAR = '*'
HOUR_HAND_CHAR = 'h'
MINUTE_HAND_CHAR = 'm'


def new_field(width=WIDTH, height=HEIGHT):
    return [[' '] * width for _ in range(height)]


def clear(field):
    for row in field:
        for x in range(len(row)):
            row[x] = ' '


def in_bounds(x, y):
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


def round_half_away(value):
    """0.5はゼロから遠い方へ丸める（Pythonのround()は偶数丸め）"""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


# ==============================================================================
# 描画プリミティブ
# ==============================================================================
def draw_circle(field):
    for y in range(HEIGHT):
        for x in range(WIDTH):
            dx = (x - CENTER_X) * 0.5
            dy = y - CENTER_Y
            distance = math.sqrt(dx * dx + dy * dy)
            if abs(distance - CIRCLE_RADIUS) <= 0.5:
                field[y][x] = CIRCLE_CHAR


def draw_markers(field):
    for hour in range(1, 13):
        angle = math.radians(hour * 30)
        x = math.floor(CENTER_X + MARKER_RADIUS * math.sin(angle) * X_SCALE)
        y = math.floor(CENTER_Y - MARKER_RADIUS * math.cos(angle))
        if not in_bounds(x, y):
            continue
        label = str(hour)
        if len(label) == 1:
            field[y][x] = label
        elif in_bounds(x - 1, y):
            # 2桁は十の位を左隣に置く
            field[y][x - 1] = label[0]
            field[y][x] = label[1]


def draw_hand(field, angle, length, symbol):
    # 中心は描かない（i=1から）
    for i in range(1, length + 1):
        x = round_half_away(CENTER_X + i * math.sin(angle) * X_SCALE)
        y = round_half_away(CENTER_Y - i * math.cos(angle))
        if in_bounds(x, y):
            field[y][x] = symbol


def compose_frame(minute_angle, hour_angle):
    """文字盤・数字・時針・分針の順に重ね描きしたフィールドを返す"""
    field = new_field()
    draw_circle(field)
    draw_markers(field)
    draw_hand(field, hour_angle, HOUR_HAND_LENGTH, HOUR_HAND_CHAR)
    draw_hand(field, minute_angle, MINUTE_HAND_LENGTH, MINUTE_HAND_CHAR)
    return field


def field_rows(field):
    return ["".join(row) for row in field]
