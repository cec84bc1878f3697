from config import ApplicationConfig

# Minimum bcrypt cost keeps the suite fast; hashing reads this at call time
ApplicationConfig.BCRYPT_ROUNDS = 4
