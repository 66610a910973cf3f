from chip8.constants import SCREEN_HEIGHT, SCREEN_WIDTH


class Display:
    """
    monochrome frame buffer, one bytearray per row holding 0 (OFF) or 1 (ON) for each pixel
    the host renders it through snapshot() and uses the dirty flag to skip frames where nothing changed
    """

    def __init__(self, w=SCREEN_WIDTH, h=SCREEN_HEIGHT):
        self.w, self.h = w, h
        self.rows = [bytearray(w) for _ in range(h)]
        self.dirty = True

    def pixel(self, x, y):
        """return 1 if pixel is ON, return 0 if pixel is OFF"""
        return self.rows[y % self.h][x % self.w]

    def clear(self):
        for row in self.rows:
            row[:] = bytes(self.w)
        self.dirty = True

    def draw_sprite(self, x, y, sprite):
        """
        XOR each sprite byte (one row, 8 pixels, MSB on the left) onto the buffer starting at (x, y)
        coordinates wrap around the screen edges
        return True if any pixel that was ON got turned OFF (collision)
        """
        x, y = x % self.w, y % self.h
        collision = False
        for i, sprite_byte in enumerate(sprite):
            row = self.rows[(y + i) % self.h]
            for j in range(8):
                if not sprite_byte & (0x80 >> j):
                    continue
                x_coordinate = (x + j) % self.w
                # the only case when a pixel gets erased is when it was ON and is turned ON again
                if row[x_coordinate]:
                    collision = True
                row[x_coordinate] ^= 1
        self.dirty = True
        return collision

    def snapshot(self):
        return tuple(bytes(row) for row in self.rows)
