#------------------------------------------------------------
#                      report_service.py
#          Writes the rendered dashboard report to disk.

import os

# This function does save report text to the given path.
# It creates missing parent folders and overwrites the target file.
def save_report(path: str, content: str) -> str:
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as file_handle:
        file_handle.write(content if content.endswith("\n") else content + "\n")
    return path
