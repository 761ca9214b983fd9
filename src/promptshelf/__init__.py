"""promptshelf - named prompt templates kept on disk.

Store prompts in a human-editable YAML file, fetch them by name, and fill
their ``{field}`` placeholders. Bundled defaults merge into a user library
without clobbering prompts the user has locked.
"""

__version__ = "0.1.0"
