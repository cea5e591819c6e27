from typing import Optional

class Score:
    def __init__(
        self,
        movie_id: int,
        user_id: int,
        value: float
    ):
        self.movie_id = movie_id
        self.user_id = user_id
        self.value = value

class User:
    def __init__(
        self,
        username: str,
        name: Optional[str] = None,
        id: Optional[int] = None,
        is_admin: bool = False
    ):
        self.username = username
        self.name = name
        self.id = id
        self.is_admin = is_admin

class Movie:
    def __init__(
        self,
        title: str,
        image: Optional[str] = None,
        id: Optional[int] = None,
        score: float = 0.0,
        count: int = 0
    ):
        self.title = title
        self.image = image
        self.id = id
        self.score = score
        self.count = count
