"""Translation tables for the todo CLI/TUI."""

LANG_PACK = {
    "en": {
        "APP_TITLE": "Todo",
        # CLI
        "MSG_LIST_BUILT": "Todo list built",
        "SUMMARY_TODOS": "{count} todo(s)",
        "MSG_TODO_CREATED": "Todo {todo_id} created",
        "MSG_TODO_UPDATED": "Todo {todo_id} updated",
        "MSG_TODO_DELETED": "Todo {todo_id} deleted",
        "MSG_TODO_MOVED": "Todo {todo_id} moved",
        "MSG_ORDER_UNCHANGED": "Order unchanged",
        "MSG_ALL_DELETED": "All todos deleted",
        "ERR_TODO_NOT_FOUND": "Todo {todo_id} not found",
        "ERR_TITLE_REQUIRED": "Title is required",
        "ERR_DUE_DATE_INVALID": "Due date must look like YYYY-MM-DD",
        "ERR_CLEAR_CONFIRM": "Pass --yes to delete every todo",
        "ERR_MOVE_TARGET": "Specify --before, --up or --down",
        "ERR_INVALID_ARGUMENT": "Invalid argument: {error}",
        # Filters
        "FILTER_ALL": "All",
        "FILTER_ACTIVE": "Active",
        "FILTER_COMPLETED": "Completed",
        "CATEGORY_LABEL": "Category",
        "CATEGORY_ALL": "all",
        "COUNTS": "{active} active · {completed} done · {total} total",
        # Cards
        "LIST_EMPTY": "No todos yet",
        "LIST_EMPTY_FILTERED": "Nothing matches the current filters",
        "CTA_ADD": "Press a to add a todo",
        "DUE_LABEL": "Due",
        "DONE_LABEL": "Done",
        "ACTION_EDIT": "edit",
        "ACTION_DELETE": "delete",
        # Editor
        "EDITOR_TITLE_CREATE": "New todo",
        "EDITOR_TITLE_EDIT": "Edit todo",
        "FIELD_TITLE": "Title",
        "FIELD_DESCRIPTION": "Description",
        "FIELD_CATEGORY": "Category",
        "FIELD_DUE_DATE": "Due date (YYYY-MM-DD)",
        "FIELD_COMPLETED": "Completed",
        "BUTTON_SAVE": "Save",
        "BUTTON_CANCEL": "Cancel",
        # Status line
        "STATUS_SAVED": "Saved",
        "STATUS_DELETED": "Deleted “{title}”",
        "STATUS_MOVED": "Order saved",
        "STATUS_NOT_FOUND": "Todo no longer exists",
        "STATUS_CLEAR_CONFIRM": "Delete ALL todos? y/n",
        "STATUS_ALL_DELETED": "All todos deleted",
        "STATUS_CANCELLED": "Cancelled",
        "STATUS_DRAG": "Moving “{title}”: release on another card",
        "STATUS_FILTER_SET": "Showing: {value}",
        "STATUS_CATEGORY_SET": "Category: {value}",
        "FOOTER_KEYS": "a add · e edit · x delete · 1/2/3 status · f cycle status · c category · K/J move · D clear · q quit",
        "FOOTER_EDITOR_KEYS": "tab next field · ctrl-s save · esc cancel",
    },
    "ru": {
        "APP_TITLE": "Дела",
        "MSG_LIST_BUILT": "Список дел построен",
        "SUMMARY_TODOS": "Дел: {count}",
        "MSG_TODO_CREATED": "Дело {todo_id} создано",
        "MSG_TODO_UPDATED": "Дело {todo_id} обновлено",
        "MSG_TODO_DELETED": "Дело {todo_id} удалено",
        "MSG_TODO_MOVED": "Дело {todo_id} перемещено",
        "MSG_ORDER_UNCHANGED": "Порядок не изменился",
        "MSG_ALL_DELETED": "Все дела удалены",
        "ERR_TODO_NOT_FOUND": "Дело {todo_id} не найдено",
        "ERR_TITLE_REQUIRED": "Нужен заголовок",
        "ERR_DUE_DATE_INVALID": "Срок в формате ГГГГ-ММ-ДД",
        "ERR_CLEAR_CONFIRM": "Добавь --yes, чтобы удалить все дела",
        "ERR_MOVE_TARGET": "Укажи --before, --up или --down",
        "ERR_INVALID_ARGUMENT": "Неверный аргумент: {error}",
        "FILTER_ALL": "Все",
        "FILTER_ACTIVE": "Активные",
        "FILTER_COMPLETED": "Готовые",
        "CATEGORY_LABEL": "Категория",
        "CATEGORY_ALL": "все",
        "COUNTS": "активных {active} · готово {completed} · всего {total}",
        "LIST_EMPTY": "Дел пока нет",
        "LIST_EMPTY_FILTERED": "Под фильтры ничего не подходит",
        "CTA_ADD": "Нажми a, чтобы добавить дело",
        "DUE_LABEL": "Срок",
        "DONE_LABEL": "Готово",
        "ACTION_EDIT": "изменить",
        "ACTION_DELETE": "удалить",
        "EDITOR_TITLE_CREATE": "Новое дело",
        "EDITOR_TITLE_EDIT": "Правка дела",
        "FIELD_TITLE": "Заголовок",
        "FIELD_DESCRIPTION": "Описание",
        "FIELD_CATEGORY": "Категория",
        "FIELD_DUE_DATE": "Срок (ГГГГ-ММ-ДД)",
        "FIELD_COMPLETED": "Готово",
        "BUTTON_SAVE": "Сохранить",
        "BUTTON_CANCEL": "Отмена",
        "STATUS_SAVED": "Сохранено",
        "STATUS_DELETED": "Удалено «{title}»",
        "STATUS_MOVED": "Порядок сохранён",
        "STATUS_NOT_FOUND": "Дела уже нет",
        "STATUS_CLEAR_CONFIRM": "Удалить ВСЕ дела? y/n",
        "STATUS_ALL_DELETED": "Все дела удалены",
        "STATUS_CANCELLED": "Отменено",
        "STATUS_DRAG": "Перенос «{title}»: отпусти на другой карточке",
        "STATUS_FILTER_SET": "Показаны: {value}",
        "STATUS_CATEGORY_SET": "Категория: {value}",
    },
}
