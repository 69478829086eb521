from publick.exceptions import ErrorMessageException


class Errors:
    INVALID_TOKEN = ErrorMessageException(401, 1, "Invalid admin token.")
    CONFIG_SAVE_FAILED = ErrorMessageException(500, 2, "Failed to save \"{}\" setting!")
    UNKNOWN_ACTION = ErrorMessageException(400, 3, "Unknown action \"{}\".")
    INVALID_BACKUP_NAME = ErrorMessageException(400, 4, "Backup name must be between 1 and 255 characters long.")
    BACKUP_EXISTS = ErrorMessageException(400, 5, "Backup \"{}\" already exists!")
    UNKNOWN_BACKUP = ErrorMessageException(404, 6, "Unknown backup \"{}\".")
