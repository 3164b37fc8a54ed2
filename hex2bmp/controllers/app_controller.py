"""Контроллер приложения: связывает виджеты с сессией конвертации.

SOLID:
- SRP: только обработка событий UI и синхронизация виджетов.
- DIP: вся работа с данными — через `ConversionSession`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from tkinter import TclError, filedialog, messagebox
from typing import Optional, Tuple

import customtkinter as ctk

from hex2bmp.config import AppConfig
from hex2bmp.services.session_service import ConversionSession
from hex2bmp.ui.bottom_bar import BottomBar
from hex2bmp.ui.image_viewer import ImageViewer
from hex2bmp.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Бинд событий (UI -> контроллер).
    - Выбор файла, загрузка примера, конвертация и сохранение через `ConversionSession`.
    - Синхронизация предпросмотра, информации, ошибки и зума.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk
    config: AppConfig = field(default_factory=AppConfig)

    _session: Optional[ConversionSession] = None

    def __post_init__(self) -> None:
        if self._session is None:
            self._session = ConversionSession(config=self.config)

    def bind_events(self) -> None:
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_load_example = self._handle_load_example
        self.sidebar.on_save_example = self._handle_save_example
        self.sidebar.on_convert = self._handle_convert
        self.sidebar.on_save_bmp = self._handle_save_bmp

        self.viewer.on_cursor_move = self._handle_cursor_move
        self.viewer.on_zoom_change = self._handle_viewer_zoom_changed

        self.bottom.on_zoom_change = self._handle_zoom_change
        self.bottom.on_zoom_preset = self._handle_zoom_change
        self.bottom.on_zoom_fit = self._handle_zoom_fit

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        patterns = " ".join(f"*{ext}" for ext in self.config.accepted_extensions)
        try:
            file_path = filedialog.askopenfilename(
                title="Выберите файл с hex-данными",
                filetypes=(("Hex data", patterns), ("All files", "*.*")),
            )
        except TclError:
            # Silent fail if dialog cannot open
            return
        if not file_path:
            return

        try:
            self._session.select_file(file_path)
        except OSError as exc:
            messagebox.showerror("Ошибка", str(exc), parent=self.window)
            return
        self.sidebar.set_source_name(self._session.source_name)
        self._sync_result()

    def _handle_convert(self) -> None:
        self._session.process()
        self._sync_result()

    def _handle_load_example(self) -> None:
        self.sidebar.set_busy(True)
        self.window.update_idletasks()
        try:
            self._session.load_example()
        except OSError as exc:
            logger.error("Пример недоступен: %s", exc)
            messagebox.showerror("Ошибка", f"Ошибка загрузки примера: {exc}", parent=self.window)
        finally:
            self.sidebar.set_busy(False)
        self.sidebar.set_source_name(self._session.source_name)
        self._sync_result()

    def _handle_save_example(self) -> None:
        target = filedialog.asksaveasfilename(
            title="Сохранить пример",
            initialfile=self.config.example_name,
            defaultextension=".h",
        )
        if not target:
            return
        try:
            self._session.save_example(target)
        except OSError as exc:
            messagebox.showerror("Ошибка", f"Ошибка сохранения примера: {exc}", parent=self.window)

    def _handle_save_bmp(self) -> None:
        if not self._session.has_result:
            return
        target = filedialog.asksaveasfilename(
            title="Сохранить BMP",
            initialfile=self.config.download_name,
            defaultextension=".bmp",
            filetypes=(("BMP", "*.bmp"), ("All files", "*.*")),
        )
        if not target:
            return
        try:
            self._session.save_bmp(target)
        except OSError as exc:
            messagebox.showerror("Ошибка", f"Не удалось сохранить BMP: {exc}", parent=self.window)

    def _handle_cursor_move(self, x: Optional[int], y: Optional[int], rgba: Optional[Tuple[int, int, int, int]]) -> None:
        self.sidebar.update_cursor_info(x, y, rgba)

    def _handle_viewer_zoom_changed(self, zoom_percent: int) -> None:
        # Sync slider when user zooms with mouse wheel
        self.bottom.set_zoom_percent(zoom_percent)

    def _handle_zoom_change(self, zoom_percent: int) -> None:
        self.viewer.set_zoom_percent(zoom_percent)

    def _handle_zoom_fit(self) -> None:
        self.viewer.set_zoom_to_fit()
        self.bottom.set_zoom_percent(self.viewer.get_zoom_percent())

    # ---- Helpers ----
    def _sync_result(self) -> None:
        """Переносит состояние сессии в виджеты (включая очистку после ошибки)."""
        self.sidebar.set_error(self._session.error)
        self.sidebar.set_image_info(self._session.info())
        self.sidebar.update_cursor_info(None, None, None)
        self.viewer.set_image(self._session.preview)
        self.bottom.set_zoom_percent(self.viewer.get_zoom_percent())
