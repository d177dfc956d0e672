#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# フレームをRGB画像にしてffplayへ流す
# 実行例: python3 rawvideo.py | ffplay -f rawvideo -pixel_format rgb24 -video_size 640x384 -

import sys
import argparse

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from clock_face import WIDTH, HEIGHT
from spin_clock import play

CELL_WIDTH = 8
CELL_HEIGHT = 16
BACKGROUND = (255, 255, 255)  # 白背景
FOREGROUND = (0, 0, 0)


class RawVideoWriter:
    def __init__(self, out=None, cell_width=CELL_WIDTH, cell_height=CELL_HEIGHT):
        self.out = out if out is not None else sys.stdout.buffer
        self.cell_width, self.cell_height = cell_width, cell_height
        self.font = ImageFont.load_default()

    @property
    def video_size(self):
        return WIDTH * self.cell_width, HEIGHT * self.cell_height

    # 画像出力ではカーソルも画面消去も不要
    def hide_cursor(self):
        pass

    def show_cursor(self):
        pass

    def clear_screen(self):
        pass

    def render(self, field):
        img = Image.new("RGB", self.video_size, BACKGROUND)
        draw = ImageDraw.Draw(img)
        for y, row in enumerate(field):
            for x, char in enumerate(row):
                if char != ' ':
                    draw.text((x * self.cell_width, y * self.cell_height), char, fill=FOREGROUND, font=self.font)
        return img

    def write_frame(self, field):
        arr = np.array(self.render(field), dtype=np.uint8)
        self.out.write(arr.tobytes())
        self.out.flush()

    def flush(self):
        self.out.flush()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Spinning ASCII clock as raw RGB24 video for ffplay.")
    parser.add_argument('--cell-width', type=int, default=CELL_WIDTH,
                        help='Pixel width of one character cell.')
    parser.add_argument('--cell-height', type=int, default=CELL_HEIGHT,
                        help='Pixel height of one character cell.')
    args = parser.parse_args(argv)

    writer = RawVideoWriter(cell_width=args.cell_width, cell_height=args.cell_height)
    width, height = writer.video_size
    print(f"Raw video: {width}x{height} rgb24", file=sys.stderr)
    return play(writer)


if __name__ == '__main__':
    sys.exit(main())
