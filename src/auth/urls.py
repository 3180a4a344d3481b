LOGIN_URL = "/api/v1/auth/login"
