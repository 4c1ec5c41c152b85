def message_response(message: str) -> dict:
    return {"message": message}
