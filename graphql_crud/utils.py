def lower_case_first_letter(name: str) -> str:
    if not name:
        return name
    return name[0].lower() + name[1:]
