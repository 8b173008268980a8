class AppStatusCode:
    OPERATION_FAILED = "200"
    INVALID_INPUT = "202"
    NOT_FOUND = "203"
