from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_compress import Compress
from flask_cors import CORS

db = SQLAlchemy()
migrate = Migrate()
compress = Compress()
cors = CORS()
