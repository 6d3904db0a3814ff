"""Address constraints."""

# National identity number, loose form: up to 16 alphanumerics, dots or dashes
DNI_LITE_PATTERN = r"^[0-9A-Za-z\-.]{1,16}$"
