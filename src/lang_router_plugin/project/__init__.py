"""Access to the target vue-cli project: manifest, framework detection and example files."""
