import os
import traceback
import uuid
from flask import Flask, request, jsonify, render_template, send_file, url_for
from flask_cors import CORS
from werkzeug.utils import secure_filename

from huffman_codec import FormatError, HuffmanError, compress_file, decompress_file, mode_for_filename
from huffman_codec.stats import format_bytes, format_elapsed

# -----------------------------------------------------------
# PATH CONFIGURATION
# -----------------------------------------------------------
BASE_DIR = os.path.abspath(os.path.dirname(__file__))
DATA_DIR = os.environ.get("HUFFMAN_DATA_DIR", os.path.join(BASE_DIR, "data"))
MAX_UPLOAD_MB = int(os.environ.get("HUFFMAN_MAX_UPLOAD_MB", "64"))

ALLOWED_EXTENSIONS = {"txt", "pdf", "bin", "csv", "json", "log", "md"}

# -----------------------------------------------------------
# FLASK APP SETUP
# -----------------------------------------------------------
app = Flask(__name__, template_folder="templates")
app.config["DATA_DIR"] = DATA_DIR
app.config["MAX_CONTENT_LENGTH"] = MAX_UPLOAD_MB * 1024 * 1024
CORS(app)

# -----------------------------------------------------------
# HELPER FUNCTIONS
# -----------------------------------------------------------
def new_job_dir():
    # One folder per request so uploads with the same name never overwrite each other
    job = uuid.uuid4().hex
    path = os.path.join(app.config["DATA_DIR"], job)
    os.makedirs(path, exist_ok=True)
    return job, path


def file_extension(filename):
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""

# -----------------------------------------------------------
# ROUTES
# -----------------------------------------------------------
@app.route("/")
def home():
    return render_template("index.html")

# -----------------------------------------------------------
# COMPRESSION ROUTES
# -----------------------------------------------------------
@app.route("/compress_file", methods=["POST"])
def compress_file_route():
    try:
        file = request.files.get("file")
        if not file or not file.filename:
            return jsonify({"success": False, "error": "No file uploaded"}), 400

        filename = secure_filename(file.filename)
        if file_extension(filename) not in ALLOWED_EXTENSIONS:
            return jsonify({"success": False, "error": "Unsupported file type"}), 400

        job, job_path = new_job_dir()
        input_path = os.path.join(job_path, filename)
        file.save(input_path)

        compressed_filename = f"{filename}.huff"
        compressed_path = os.path.join(job_path, compressed_filename)
        result = compress_file(input_path, compressed_path, mode_for_filename(filename))

        if result["empty"]:
            print(f"Empty upload, nothing to compress: {filename}")
            return jsonify({
                "success": True,
                "empty": True,
                "filename": filename,
                "message": "The input file is empty. No compression needed.",
            })

        print(f"✅ Compressed '{filename}' → '{compressed_filename}' ({result['ratio']:.2f}%)")
        result.update({
            "filename": filename,
            "compressed_filename": compressed_filename,
            "original_size_text": format_bytes(result["original_size"]),
            "compressed_size_text": format_bytes(result["compressed_size"]),
            "elapsed_text": format_elapsed(result["elapsed_ms"]),
            "job": job,
            "download_url": url_for("download_file", job=job, filename=compressed_filename),
        })
        return jsonify(result)

    except (HuffmanError, ValueError) as e:
        print("Error in /compress_file:", e)
        return jsonify({"success": False, "error": str(e)}), 422
    except Exception as e:
        print("Error in /compress_file:", e)
        traceback.print_exc()
        return jsonify({"success": False, "error": "Internal server error"}), 500


@app.route("/decompress_file", methods=["POST"])
def decompress_file_route():
    try:
        file = request.files.get("file")
        if not file or not file.filename:
            return jsonify({"success": False, "error": "No file uploaded"}), 400

        filename = secure_filename(file.filename)
        if not filename.endswith(".huff"):
            return jsonify({"success": False, "error": "Invalid file type"}), 400

        job, job_path = new_job_dir()
        input_path = os.path.join(job_path, filename)
        file.save(input_path)

        base_name = filename[:-5]  # remove ".huff"
        stem, dot, ext = base_name.rpartition(".")
        output_filename = f"{stem}_decompressed.{ext}" if dot else f"{base_name}_decompressed"
        output_path = os.path.join(job_path, output_filename)

        result = decompress_file(input_path, output_path, mode_for_filename(filename))

        print(f"✅ Decompressed '{filename}' → '{output_filename}'")
        result.update({
            "original_huff": filename,
            "decompressed_file": output_filename,
            "elapsed_text": format_elapsed(result["elapsed_ms"]),
            "job": job,
            "download_url": url_for("download_file", job=job, filename=output_filename),
        })
        return jsonify(result)

    except FormatError as e:
        print("Corrupt upload in /decompress_file:", e)
        return jsonify({"success": False, "error": f"Not a valid compressed file: {e}"}), 422
    except (HuffmanError, ValueError) as e:
        print("Error in /decompress_file:", e)
        return jsonify({"success": False, "error": str(e)}), 422
    except Exception as e:
        print("Error in /decompress_file:", e)
        traceback.print_exc()
        return jsonify({"success": False, "error": "Internal server error"}), 500


@app.route("/download/<job>/<filename>")
def download_file(job, filename):
    filename = secure_filename(filename)
    file_path = os.path.join(app.config["DATA_DIR"], secure_filename(job), filename)
    if not filename or not os.path.isfile(file_path):
        return "File not found", 404

    return send_file(file_path, as_attachment=True, download_name=filename, mimetype="application/octet-stream")

# -----------------------------------------------------------
if __name__ == "__main__":
    app.run(debug=True)
