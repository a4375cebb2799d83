import uvicorn

from researchai.config import HOST, PORT


def main():
    uvicorn.run("researchai.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
