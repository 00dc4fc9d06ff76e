from flask_babel import Babel
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

from utils.image_store import ImageStore

db = SQLAlchemy()
babel = Babel()
cors = CORS()
image_store = ImageStore()
