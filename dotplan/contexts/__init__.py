"""Context providers for user, OS, environment and variables, and their assembly."""