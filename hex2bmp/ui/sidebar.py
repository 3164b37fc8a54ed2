"""Боковая панель: выбор источника, конвертация, информация и ошибки.

Принципы:
- SRP: управляет только элементами панели, не содержит логики разбора.
- ISP: события наружу через `on_*`, состояние внутрь через `set_*`.
"""
from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

import customtkinter as ctk


def _rgba_to_hex(rgba: Tuple[int, int, int, int]) -> str:
    """Преобразует RGBA в HEX (без альфа)."""
    r, g, b, _a = rgba
    return f"#{r:02X}{g:02X}{b:02X}"


def _rgb_to_rgb565(r: int, g: int, b: int) -> int:
    return ((r >> 3) << 11) | ((g >> 2) << 5) | (b >> 3)


class Sidebar(ctk.CTkFrame):
    """Панель с блоками: источник, информация, курсор, ошибка."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_load_example: Optional[Callable[[], None]] = None
        self.on_save_example: Optional[Callable[[], None]] = None
        self.on_convert: Optional[Callable[[], None]] = None
        self.on_save_bmp: Optional[Callable[[], None]] = None

        bold = ctk.CTkFont(size=16, weight="bold")

        # Source
        self._title = ctk.CTkLabel(self, text="Источник", font=bold)
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Открыть файл с hex-данными…", command=lambda: self._emit(self.on_open_file))
        self._open_btn.grid(row=1, column=0, padx=8, pady=(0, 4), sticky="ew")

        self._file_val = ctk.StringVar(value="Файл не выбран")
        self._file_label = ctk.CTkLabel(self, textvariable=self._file_val, wraplength=250, anchor="w", justify="left")
        self._file_label.grid(row=2, column=0, padx=8, pady=(0, 8), sticky="ew")

        self._example_btn = ctk.CTkButton(self, text="Загрузить пример", command=lambda: self._emit(self.on_load_example))
        self._example_btn.grid(row=3, column=0, padx=8, pady=(0, 4), sticky="ew")
        self._example_save_btn = ctk.CTkButton(
            self, text="Сохранить пример…", fg_color="transparent", border_width=1,
            command=lambda: self._emit(self.on_save_example),
        )
        self._example_save_btn.grid(row=4, column=0, padx=8, pady=(0, 8), sticky="ew")

        self._convert_btn = ctk.CTkButton(self, text="Преобразовать", state="disabled", command=lambda: self._emit(self.on_convert))
        self._convert_btn.grid(row=5, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=bold)
        self._info_title.grid(row=6, column=0, padx=8, pady=(8, 4), sticky="w")

        self._name_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._pixels_val = ctk.StringVar(value="—")

        self._info_name = ctk.CTkLabel(self, textvariable=self._name_val, wraplength=250, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")
        self._info_pixels = ctk.CTkLabel(self, textvariable=self._pixels_val, anchor="w", justify="left")

        self._info_name.grid(row=7, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=8, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_pixels.grid(row=9, column=0, padx=8, pady=(0, 8), sticky="ew")

        self._save_btn = ctk.CTkButton(self, text="Сохранить BMP…", state="disabled", command=lambda: self._emit(self.on_save_bmp))
        self._save_btn.grid(row=10, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Cursor section
        self._cursor_title = ctk.CTkLabel(self, text="Курсор", font=bold)
        self._cursor_title.grid(row=11, column=0, padx=8, pady=(8, 4), sticky="w")

        self._cursor_xy_val = ctk.StringVar(value="—")
        self._cursor_rgb_val = ctk.StringVar(value="—")
        self._cursor_hex_val = ctk.StringVar(value="—")

        self._cursor_xy = ctk.CTkLabel(self, textvariable=self._cursor_xy_val, anchor="w", justify="left")
        self._cursor_rgb = ctk.CTkLabel(self, textvariable=self._cursor_rgb_val, anchor="w", justify="left")
        self._cursor_hex = ctk.CTkLabel(self, textvariable=self._cursor_hex_val, anchor="w", justify="left")

        self._cursor_xy.grid(row=12, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_rgb.grid(row=13, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_hex.grid(row=14, column=0, padx=8, pady=(0, 2), sticky="ew")

        # Error section, hidden until set_error
        self._error_title = ctk.CTkLabel(self, text="Ошибка", font=bold, text_color="#d9534f")
        self._error_val = ctk.StringVar(value="")
        self._error_label = ctk.CTkLabel(
            self, textvariable=self._error_val, wraplength=250, anchor="w", justify="left", text_color="#d9534f"
        )

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def set_source_name(self, name: Optional[str]) -> None:
        self._file_val.set(name or "Файл не выбран")
        self._convert_btn.configure(state="normal" if name else "disabled")

    def set_image_info(self, info: Dict[str, str]) -> None:
        """Отображает сведения о массиве; пустой словарь очищает блок."""
        self._name_val.set(f"Массив: {info['name']}" if info else "—")
        self._dims_val.set(f"Размеры: {info['dimensions']} px" if info else "—")
        self._pixels_val.set(f"Всего пикселей: {info['pixels']}" if info else "—")
        self._save_btn.configure(state="normal" if info else "disabled")

    def set_error(self, message: str) -> None:
        """Показывает текст ошибки; пустая строка скрывает блок."""
        self._error_val.set(message)
        if message:
            self._error_title.grid(row=20, column=0, padx=8, pady=(8, 4), sticky="w")
            self._error_label.grid(row=21, column=0, padx=8, pady=(0, 8), sticky="ew")
        else:
            self._error_title.grid_remove()
            self._error_label.grid_remove()

    def set_busy(self, busy: bool) -> None:
        state = "disabled" if busy else "normal"
        self._open_btn.configure(state=state)
        self._example_btn.configure(state=state, text="Загрузка…" if busy else "Загрузить пример")

    def update_cursor_info(self, x: Optional[int], y: Optional[int], rgba: Optional[Tuple[int, int, int, int]]) -> None:
        """Обновляет информацию по курсору (координаты, RGB, HEX и исходное RGB565)."""
        if x is None or y is None or rgba is None:
            self._cursor_xy_val.set("—")
            self._cursor_rgb_val.set("—")
            self._cursor_hex_val.set("—")
            return
        self._cursor_xy_val.set(f"({x}, {y})")
        r, g, b, _a = rgba
        self._cursor_rgb_val.set(f"RGB: {r}, {g}, {b}")
        self._cursor_hex_val.set(f"HEX: {_rgba_to_hex(rgba)}  RGB565: 0x{_rgb_to_rgb565(r, g, b):04X}")

    # ---- Events ----
    @staticmethod
    def _emit(callback: Optional[Callable[[], None]]) -> None:
        if callback:
            callback()
