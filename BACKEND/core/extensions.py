from flask_compress import Compress
from flask_cors import CORS

# Initialize extensions
compress = Compress()
cors = CORS()
