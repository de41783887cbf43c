"""Editor window (Qt) — renders an EditSession and forwards key presses to it."""
import logging
from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QLineEdit, QPushButton, QListWidget,
    QPlainTextEdit, QStatusBar, QSplitter,
)
from PyQt5.QtGui import QFont
from PyQt5.QtCore import Qt, pyqtSignal

logger = logging.getLogger(__name__)


class EditorView(QPlainTextEdit):
    """Text view whose contents are owned by an EditSession.

    The widget never edits its own document: every key press becomes a
    session call, then the document is re-rendered from the session.
    """

    edited = pyqtSignal()
    completion_requested = pyqtSignal()

    def __init__(self, session, on_boundary=None, parent=None):
        super().__init__(parent)
        self.session = session
        self._on_boundary = on_boundary
        self.setFont(QFont("Sans", 14))
        self.setContextMenuPolicy(Qt.NoContextMenu)
        self.setAcceptDrops(False)
        self.setUndoRedoEnabled(False)

    def render_session(self):
        self.blockSignals(True)
        self.setPlainText(self.session.text)
        cursor = self.textCursor()
        cursor.setPosition(self.session.cursor_offset)
        self.setTextCursor(cursor)
        self.blockSignals(False)

    def type_text(self, text: str):
        for ch in text:
            if ch in (' ', '\n') and self._on_boundary is not None:
                self._on_boundary()
            self.session.type_char(ch)

    def keyPressEvent(self, event):
        key = event.key()
        mods = event.modifiers()
        ctrl = bool(mods & Qt.ControlModifier)
        shift = bool(mods & Qt.ShiftModifier)

        if ctrl and key == Qt.Key_Z and not shift:
            self.session.undo()
        elif ctrl and (key == Qt.Key_Y or (key == Qt.Key_Z and shift)):
            self.session.redo()
        elif key == Qt.Key_Left:
            self.session.move_left()
        elif key == Qt.Key_Right:
            self.session.move_right()
        elif key == Qt.Key_Backspace:
            self.session.backspace()
        elif key == Qt.Key_Tab:
            self.completion_requested.emit()
            return
        elif key in (Qt.Key_Return, Qt.Key_Enter):
            self.type_text('\n')
        elif event.text() and event.text().isprintable() and not ctrl:
            self.type_text(event.text())
        else:
            event.ignore()
            return
        self.render_session()
        self.edited.emit()

    def _swallow_mouse(self, event):
        # Caret position comes only from the session.
        self.setFocus()
        self.render_session()
        event.accept()

    def mousePressEvent(self, event):
        self._swallow_mouse(event)

    def mouseMoveEvent(self, event):
        self._swallow_mouse(event)

    def mouseReleaseEvent(self, event):
        self._swallow_mouse(event)

    def mouseDoubleClickEvent(self, event):
        self._swallow_mouse(event)

    def focusNextPrevChild(self, next):
        # Keep Tab for completion instead of focus traversal.
        return False


class EditorWindow(QMainWindow):
    """Main window: editor, suggestion list and dictionary entry field."""

    def __init__(self, session, config, word_list=None, parent=None):
        super().__init__(parent)
        self.session = session
        self.config = config
        self.word_list = word_list

        self.setWindowTitle("Typeahead — Text Editor with Autocomplete + Undo/Redo")
        self.resize(900, 600)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        # === Editor + suggestions ===
        splitter = QSplitter(Qt.Horizontal)
        self.view = EditorView(session, on_boundary=self._learn_current_word)
        self.view.edited.connect(self.update_suggestions)
        self.view.completion_requested.connect(self.insert_selected_suggestion)
        splitter.addWidget(self.view)

        self.suggestion_list = QListWidget()
        self.suggestion_list.setFocusPolicy(Qt.NoFocus)
        self.suggestion_list.itemDoubleClicked.connect(lambda _item: self.insert_selected_suggestion())
        splitter.addWidget(self.suggestion_list)
        splitter.setStretchFactor(0, 4)
        splitter.setStretchFactor(1, 1)
        layout.addWidget(splitter)

        # === Add word ===
        add_row = QHBoxLayout()
        add_row.addWidget(QLabel("Add to Dictionary:"))
        self.add_word_input = QLineEdit()
        self.add_word_input.returnPressed.connect(self.add_word)
        add_row.addWidget(self.add_word_input)
        self.add_btn = QPushButton("Add Word")
        self.add_btn.clicked.connect(self.add_word)
        add_row.addWidget(self.add_btn)
        layout.addLayout(add_row)

        # Status bar
        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)

        self.view.render_session()
        self.update_suggestions()
        self.view.setFocus()

    def _learn_current_word(self):
        if self.word_list is None or not self.config.auto_add_words:
            return
        self.word_list.learn(self.session, self.session.current_prefix(),
                             self.config.auto_add_min_length)

    def update_suggestions(self):
        self.suggestion_list.clear()
        words = self.session.suggestions(self.config.suggestion_count)
        self.suggestion_list.addItems(words)
        if words:
            self.suggestion_list.setCurrentRow(0)
        depth = self.session.history.undo_depth
        self._statusbar.showMessage(f"Words: {self.session.index.word_count} | Undo: {depth}")

    def insert_selected_suggestion(self):
        item = self.suggestion_list.currentItem()
        if item is None:
            return
        chosen = item.text()
        prefix = self.session.current_prefix()
        if not chosen.startswith(prefix):
            return
        self.view.type_text(chosen[len(prefix):] + ' ')
        self.view.render_session()
        self.update_suggestions()
        self.view.setFocus()

    def add_word(self):
        word = self.add_word_input.text().strip().lower()
        if not word:
            return
        try:
            if self.word_list is not None:
                added = self.word_list.add(word)
            else:
                added = (self.session.index.is_indexable(word)
                         and self.session.index.suggest(word, 1) != [word])
        except OSError as e:
            logger.warning("Could not save word list: %s", e)
            self._statusbar.showMessage(f"Could not save dictionary: {e}", 5000)
            return
        if added:
            self.session.add_dictionary_word(word)
        self.add_word_input.clear()
        self.update_suggestions()
        if added:
            self._statusbar.showMessage(f"Added: {word}", 3000)
        else:
            self._statusbar.showMessage(f"Already exists or invalid: {word}", 3000)
